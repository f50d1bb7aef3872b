"""Static data about reference files and resource pack layout.

File names, format versions and display limits shared by the
reference builders and the validators.
"""

# Type used for reference file versions
Version = int

# Key of the scalar that stores a reference file's format version
VERSION_KEY = "!version"

# Key of the scalar that stores the number of items found at generation time
COUNT_KEY = "!count"

# Prefix reserved for metadata keys; never appears in a directory key
METADATA_PREFIX = "!"

IMAGE_REF_NAME = "images.slop"
IMAGE_REF_VERSION: Version = 1

SOUND_REF_NAME = "sounds.slop"
SOUND_REF_VERSION: Version = 0

MUSIC_REF_NAME = "music.txt"

LOC_REF_NAME = "loc_keys.txt"

# Aggregate CSV holding every localization entry of the extracted game files
ALL_LOC_CSV_NAME = "Loc.csv"

# Maximum amount of items shown by any listing
MAX_LIST_SIZE = 100

# OS artifacts that are never treated as assets
IGNORED_FILE_NAMES = frozenset({"desktop.ini", "Thumbs.db", ".DS_Store"})

# Progress lines are rewritten every this many items
PROGRESS_INTERVAL = 100
MUSIC_PROGRESS_INTERVAL = 10

# Directory holding the assets inside a resource pack
PACK_CONTENT_DIR = "Content"

# Files copied verbatim from the root of a resource pack
PACK_ROOT_FILES = ("icon.png", "pack.json")

# Present in Steam Workshop packs; has to be copied by hand
WORKSHOP_FILE_NAME = "workshop.json"
