# Reference values for HSV (degrees, unit, unit) ↔ RGB (0-255) ↔ hex.

# RED
RED_HSV = (0.0, 1.0, 1.0)
RED_RGB = (255, 0, 0)
RED_HEX = "ff0000"

# GREEN
GREEN_HSV = (120.0, 1.0, 1.0)
GREEN_RGB = (0, 255, 0)
GREEN_HEX = "00ff00"

# BLUE
BLUE_HSV = (240.0, 1.0, 1.0)
BLUE_RGB = (0, 0, 255)
BLUE_HEX = "0000ff"

samples_hsv_rgb = {
    RED_HSV: RED_RGB,
    (30.0, 1.0, 1.0): (255, 128, 0),
    (60.0, 1.0, 1.0): (255, 255, 0),
    (90.0, 1.0, 1.0): (128, 255, 0),
    GREEN_HSV: GREEN_RGB,
    (180.0, 1.0, 1.0): (0, 255, 255),
    BLUE_HSV: BLUE_RGB,
    (300.0, 1.0, 1.0): (255, 0, 255),
    (0.0, 0.0, 1.0): (255, 255, 255),
    (0.0, 0.0, 0.0): (0, 0, 0),
    (0.0, 0.0, 0.5): (128, 128, 128),
    (210.0, 0.5, 0.8): (102, 153, 204),
    (330.0, 0.25, 0.4): (102, 77, 89),
}

samples_hex_rgb = {
    RED_HEX: RED_RGB,
    GREEN_HEX: GREEN_RGB,
    BLUE_HEX: BLUE_RGB,
    "ffffff": (255, 255, 255),
    "000000": (0, 0, 0),
    "6699cc": (102, 153, 204),
    "0a0b0c": (10, 11, 12),
}
