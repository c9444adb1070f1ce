from .age_calculator import calculate_age

__all__ = ["calculate_age"]
