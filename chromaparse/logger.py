import sys
import argparse

LEVEL_COLORS = {
    "info": "\033[32m",
    "warning": "\033[33m",
    "error": "\033[31m",
}
RESET = "\033[0m"


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level == "info" else sys.stderr
    if stream.isatty():
        tag = f"{LEVEL_COLORS.get(level, RESET)}[{level}]{RESET}"
    else:
        tag = f"[{level}]"
    print(f"{tag} {message}", file=stream)


class ChromaArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Report argument errors through ``log`` and exit with the standard
        CLI usage error code 2.
        """
        log("error", message)
        sys.exit(2)
