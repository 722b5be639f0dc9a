from .num_utils import round_half_away, round_to_one_decimal, np_round_half_away, is_close_to_int

__all__ = ["round_half_away", "round_to_one_decimal", "np_round_half_away", "is_close_to_int"]
