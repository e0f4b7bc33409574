"""Filter parameters for the two stage groups.

Order inside each list is the order the filters run in: every stage
expects the signal the previous one produced (denoise after de-click,
limiter after the normaliser), so entries must not be reordered.
"""

# Final loudnorm targets: integrated loudness in LUFS, true peak in dBTP.
TARGET_LUFS = -12
TRUE_PEAK_DB = -1.5

CLEANING_STAGES = [
    ("adeclip", {}),
    ("highpass", {"f": 80}),
    ("adeclick", {}),
    ("afftdn", {"nf": -25}),
    # Authored in dB; converted to linear amplitude when the chain is built.
    ("agate", {"threshold_db": -40.0, "range_db": -20.0}),
]

LEVELING_STAGES = [
    ("dynaudnorm", {"f": 200, "g": 11, "p": 0.85, "m": 20, "s": 12}),
    ("loudnorm", {"I": TARGET_LUFS, "TP": TRUE_PEAK_DB}),
]
