import numpy as np

DEFAULT_MAGNITUDE = 1.0


def project(ra_hours, dec, width, height):
    # RA 0-24h -> 0-width, dec +90 top -> -90 bottom
    x = (ra_hours / 24.0) * width
    y = ((90.0 - dec) / 180.0) * height
    return x, y


def star_radius(magnitude):
    return np.maximum(1.0, 4.0 - magnitude)
