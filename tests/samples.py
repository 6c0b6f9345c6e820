# 8-bit RGB -> (hue degrees, saturation, lightness)
samples_rgb8_hsl = {
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (120.0, 1.0, 0.5),
    (0, 0, 255): (240.0, 1.0, 0.5),
    (255, 255, 0): (60.0, 1.0, 0.5),
    (0, 255, 255): (180.0, 1.0, 0.5),
    (255, 0, 255): (300.0, 1.0, 0.5),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
    (128, 0, 0): (0.0, 1.0, 64 / 255),
    (255, 128, 0): (60 * 128 / 255, 1.0, 0.5),
    (64, 128, 192): (210.0, 128 / 254, 128 / 255),
}

# unit RGB -> HSL, same colors
samples_rgb_hsl = {
    (r / 255, g / 255, b / 255): hsl
    for (r, g, b), hsl in samples_rgb8_hsl.items()
}

# HSL -> 8-bit RGB for the primary and secondary hues
samples_hsl_rgb8 = {
    (0.0, 1.0, 0.5): (255, 0, 0),
    (60.0, 1.0, 0.5): (255, 255, 0),
    (120.0, 1.0, 0.5): (0, 255, 0),
    (180.0, 1.0, 0.5): (0, 255, 255),
    (240.0, 1.0, 0.5): (0, 0, 255),
    (300.0, 1.0, 0.5): (255, 0, 255),
    (0.0, 0.0, 0.0): (0, 0, 0),
    (0.0, 0.0, 1.0): (255, 255, 255),
    (200.0, 0.0, 1.0): (255, 255, 255),
}
