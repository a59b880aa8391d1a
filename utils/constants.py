# =========================
# FINGER STATE EXTRACTION
# =========================
FINGER_EXTENSION_RATIO = 1.5       # |MCP->TIP| must exceed ratio * |MCP->PIP|
THUMB_EXTENSION_THRESHOLD = 0.12   # |THUMB_IP->INDEX_MCP|, normalised coords
INDEX_SEPARATION_THRESHOLD = 0.1   # |INDEX_TIP->MIDDLE_TIP|, normalised coords

# =========================
# TEMPORAL STABILIZER
# =========================
CONFIRMATION_THRESHOLD = 2         # consecutive identical frames to confirm
DETECTION_COOLDOWN = 0.5           # seconds between two emissions
SHAPE_RESET_TIME = 0.5             # seconds before the same shape may re-fire

# =========================
# SYMBOLS (cued-speech syllables)
# =========================
SYMBOL_SEPARATOR = " / "

DEFAULT_SYMBOLS = {
    "None":   (),
    "Shape1": ("p", "d", "zh"),
    "Shape2": ("k", "q", "z"),
    "Shape3": ("s", "r", "h"),
    "Shape4": ("b", "n", "yu"),
    "Shape5": ("m", "t", "f"),
    "Shape6": ("l", "x", "w"),
    "Shape7": ("g", "j", "ch"),
    "Shape8": ("y", "c", "sh"),
}

# =========================
# CAMERA / TRACKER
# =========================
FPS_LIMIT = 30
MIN_DETECTION_CONFIDENCE = 0.5
MIN_TRACKING_CONFIDENCE = 0.5
