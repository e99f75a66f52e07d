"""
Constants shared across triggerwrap.
"""

# Extensions picked up when a directory is passed instead of a file.
SOURCE_FILE_EXTENSIONS = (
    ".js",
    ".jsx",
    ".mjs",
    ".cjs",
    ".ts",
    ".tsx",
    ".mts",
    ".cts",
)

# Directories never descended into when collecting sources.
IGNORED_DIRECTORIES = {".git", "node_modules", "dist", "build", "__pycache__"}
