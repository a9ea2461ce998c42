from ..types.color_types import Scalar


def check_range(name: str, value: Scalar, upper: float) -> Scalar:
    """Raise ``ValueError`` unless ``0 <= value <= upper``."""
    if not 0.0 <= value <= upper:
        raise ValueError(f"{name} must be within [0, {upper:g}], got {value!r}")
    return value


def check_channels(names: str, values, upper: float) -> None:
    for name, value in zip(names, values):
        check_range(name, value, upper)
