# terrain_generator/validation.py

"""
Precondition checks shared by the generation strategies and the colorizer.
Every check raises ConfigurationError and runs before any grid is allocated.
"""

import numbers

from .exceptions import ConfigurationError


def is_power_of_two(value: int) -> bool:
    return value > 0 and (value & (value - 1)) == 0


def _require_integer(name: str, value):
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


def validate_dimensions(width: int, height: int):
    """Texture dimensions must be positive powers of two for mipmapping."""
    for name, value in (("width", width), ("height", height)):
        _require_integer(f"Texture {name}", value)
        if value <= 0:
            raise ConfigurationError(f"Texture {name} must be positive, got {value}")
        if not is_power_of_two(value):
            raise ConfigurationError(f"Texture {name} must be a power of two, got {value}")


def validate_accretion_parameters(
    width: int, height: int, seed_centers, step_size: int,
    splat_radius: int, iterations: int, margin_width: int, noise_ceiling: int
):
    """Checks every precondition of the accretion walk."""
    validate_dimensions(width, height)
    for name, value in (
        ("step_size", step_size), ("splat_radius", splat_radius), ("iterations", iterations),
        ("margin_width", margin_width), ("noise_ceiling", noise_ceiling),
    ):
        _require_integer(name, value)

    if step_size < 1:
        raise ConfigurationError(f"step_size must be at least 1, got {step_size}")
    if splat_radius < 0:
        raise ConfigurationError(f"splat_radius must be non-negative, got {splat_radius}")
    if iterations < 0:
        raise ConfigurationError(f"iterations must be non-negative, got {iterations}")
    if not 1 <= noise_ceiling <= 256:
        raise ConfigurationError(f"noise_ceiling must be in [1, 256], got {noise_ceiling}")

    # The walker resets on leaving the interior, so the border has to absorb
    # one step plus a full splat radius.
    if margin_width < splat_radius + step_size:
        raise ConfigurationError(
            f"margin_width ({margin_width}) must be at least "
            f"splat_radius + step_size ({splat_radius + step_size})"
        )

    # len() rather than truthiness, so NumPy arrays of centers are accepted.
    if seed_centers is None or len(seed_centers) == 0:
        raise ConfigurationError("At least one seed center is required")
    for center in seed_centers:
        if not hasattr(center, '__len__') or len(center) != 2:
            raise ConfigurationError(f"Seed center must be an (x, z) pair, got {center!r}")
        x, z = center
        _require_integer("Seed center coordinate", x)
        _require_integer("Seed center coordinate", z)
        if not (margin_width <= x < width - margin_width and margin_width <= z < height - margin_width):
            raise ConfigurationError(
                f"Seed center ({x}, {z}) lies outside the safe interior "
                f"[{margin_width}, {width - margin_width}) x [{margin_width}, {height - margin_width})"
            )


def validate_pyramid_parameters(
    width: int, height: int, plain_ceiling: int, center, side: int, brick_height: int, step: int
):
    """Checks the legacy pyramid geometry and that its footprint fits the grid."""
    validate_dimensions(width, height)
    for name, value in (
        ("plain_ceiling", plain_ceiling), ("side", side),
        ("brick_height", brick_height), ("step", step),
    ):
        _require_integer(f"Pyramid {name}", value)
    if not 1 <= plain_ceiling <= 256:
        raise ConfigurationError(f"plain_ceiling must be in [1, 256], got {plain_ceiling}")
    if side <= 0 or step < 1 or brick_height < 0:
        raise ConfigurationError(
            f"Invalid pyramid geometry: side={side}, step={step}, brick_height={brick_height}"
        )
    if not hasattr(center, '__len__') or len(center) != 2:
        raise ConfigurationError(f"Pyramid center must be an (x, z) pair, got {center!r}")
    _require_integer("Pyramid center coordinate", center[0])
    _require_integer("Pyramid center coordinate", center[1])

    half = side // 2
    x0, z0 = center[0] - half, center[1] - half
    if x0 < 0 or z0 < 0 or x0 + side > width or z0 + side > height:
        raise ConfigurationError(
            f"Pyramid of side {side} centered at {tuple(center)} does not fit a {width}x{height} grid"
        )


def validate_bands(grass_threshold: int, band_thresholds):
    """Band bounds must be strictly increasing and cover [0, 255] without gaps."""
    if not band_thresholds:
        raise ConfigurationError("At least one band threshold is required")

    bounds = [bound for bound, _ in band_thresholds]
    if not 0 <= grass_threshold <= bounds[0]:
        raise ConfigurationError(
            f"grass_threshold ({grass_threshold}) must be in [0, {bounds[0]}]"
        )
    previous = 0
    for bound in bounds:
        if bound <= previous or bound > 256:
            raise ConfigurationError(
                f"Band thresholds must be strictly increasing within (0, 256], got {bounds}"
            )
        previous = bound


def validate_jitter(jitter_max: float):
    if not 0.0 <= jitter_max <= 1.0:
        raise ConfigurationError(f"jitter_max must be in [0, 1], got {jitter_max}")
