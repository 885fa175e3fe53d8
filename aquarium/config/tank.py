"""Tank scenery configuration: palettes, sand band, global clock."""

# Two fixed three-color palettes selected by the day/night flag.
TANK_COLORS = {
    "day": {"top": "#006994", "bottom": "#001e36", "sand": "#e6c288"},
    "night": {"top": "#001219", "bottom": "#000000", "sand": "#3d342b"},
}

# Global time accumulator advance per frame (drives plant sway)
TIME_STEP = 0.02

# Food below (height - SAND_LINE_OFFSET) has settled and expires
SAND_LINE_OFFSET = 30

# Sand band: top edge sits SAND_BAND_HEIGHT above the floor and undulates
SAND_BAND_HEIGHT = 60
SAND_WAVE_AMPLITUDE = 10
SAND_WAVE_FREQUENCY = 0.01
SAND_SAMPLE_STEP = 20
