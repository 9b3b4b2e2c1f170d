from os import getenv

# pacman binary used by `pacreader list`; override to point at a wrapper or a chroot's pacman
PACMAN_BIN = getenv("PACREADER_PACMAN", "pacman")

LOG_LEVEL = getenv("PACREADER_LOG_LEVEL", "INFO").upper()

# Columns shown by `pacreader list`, in display order
LIST_COLUMNS = [
    "Package name",
    "Version",
    "Description",
    "Licenses",
    "URL",
    "Installed Size",
    "Install Date",
]
