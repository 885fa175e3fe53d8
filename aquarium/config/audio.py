"""Sound effect synthesis parameters.

Each cue is one or more tone segments: a waveform whose frequency and gain
ramp between two values over the segment, either linearly or exponentially.
Times are in seconds from the start of the cue.
"""

SAMPLE_RATE = 22050
MAX_AMPLITUDE = 32767

SOUND_CUES = {
    "feed": [
        {
            "waveform": "sine",
            "start": 0.0,
            "duration": 0.1,
            "freq": (800.0, 400.0),
            "freq_ramp": "exponential",
            "gain": (0.1, 0.001),
            "gain_ramp": "exponential",
        },
    ],
    "splash": [
        {
            "waveform": "triangle",
            "start": 0.0,
            "duration": 0.3,
            "freq": (300.0, 50.0),
            "freq_ramp": "linear",
            "gain": (0.2, 0.001),
            "gain_ramp": "linear",
        },
        {
            "waveform": "sine",
            "start": 0.1,
            "duration": 0.15,
            "freq": (600.0, 1200.0),
            "freq_ramp": "exponential",
            "gain": (0.1, 0.001),
            "gain_ramp": "exponential",
        },
    ],
}
