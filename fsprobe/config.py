"""
Configuration constants for the file prober.
"""

# --- Hashing ---
HASH_CHUNK_SIZE = 64 * 1024  # 64 KB chunks for reading
# 160 * log(2) / log(36) = 30.95, so a SHA-1 fills 31 base-36 digits
SHA1_BASE36_WIDTH = 31

# --- Timestamps ---
# Canonical catalog timestamp: 14 digits, UTC
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

# --- Extension handling ---
# Passed as the extension hint to derive the extension from the path itself
DERIVE_EXTENSION = "derive"

# --- Content sniffing ---
SNIFF_BYTES = 8192  # filetype only needs 261, text detection wants more
UNKNOWN_MIME = "unknown/unknown"
GENERIC_MIME_TYPES = {UNKNOWN_MIME, "application/octet-stream"}

# Extensions the stdlib table is missing or gets wrong
EXTRA_EXTENSION_TYPES = {
    'md': 'text/markdown',
    'yaml': 'application/yaml',
    'yml': 'application/yaml',
    'webp': 'image/webp',
    'psd': 'image/vnd.adobe.photoshop',
    'flac': 'audio/flac',
    'ogg': 'application/ogg',
    'oga': 'audio/ogg',
    'ogv': 'video/ogg',
    'm4a': 'audio/mp4',
    'mkv': 'video/x-matroska',
    'webm': 'video/webm',
    'heic': 'image/heic',
    'epub': 'application/epub+zip',
    'docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    'xlsx': 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    'pptx': 'application/vnd.openxmlformats-officedocument.presentationml.presentation',
    'odt': 'application/vnd.oasis.opendocument.text',
    'ods': 'application/vnd.oasis.opendocument.spreadsheet',
    'odp': 'application/vnd.oasis.opendocument.presentation',
}

# Zip-based formats: a sniffed application/zip is refined by one of these
ZIP_CONTAINER_EXTS = {
    'docx', 'xlsx', 'pptx', 'odt', 'ods', 'odp', 'epub', 'jar', 'apk', 'xpi',
}

# Normalize vendor spellings of the same type
MIME_ALIASES = {
    'image/x-bmp': 'image/bmp',
    'image/x-ms-bmp': 'image/bmp',
    'image/jpg': 'image/jpeg',
    'image/pjpeg': 'image/jpeg',
    'image/x-png': 'image/png',
    'image/x-photoshop': 'image/vnd.adobe.photoshop',
    'application/x-photoshop': 'image/vnd.adobe.photoshop',
    'audio/x-wav': 'audio/wav',
    'audio/wave': 'audio/wav',
    'audio/mp3': 'audio/mpeg',
    'audio/x-flac': 'audio/flac',
    'audio/x-m4a': 'audio/mp4',
    'application/x-zip-compressed': 'application/zip',
    'application/x-yaml': 'application/yaml',
}

# --- Media type classification ---
# Values are MediaType values (see models.MediaType)
MEDIA_TYPE_BY_MIME = {
    'image/svg+xml': 'DRAWING',
    'application/postscript': 'DRAWING',

    'application/pdf': 'OFFICE',
    'application/rtf': 'OFFICE',
    'application/msword': 'OFFICE',
    'application/vnd.ms-excel': 'OFFICE',
    'application/vnd.ms-powerpoint': 'OFFICE',
    'application/epub+zip': 'OFFICE',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document': 'OFFICE',
    'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet': 'OFFICE',
    'application/vnd.openxmlformats-officedocument.presentationml.presentation': 'OFFICE',
    'application/vnd.oasis.opendocument.text': 'OFFICE',
    'application/vnd.oasis.opendocument.spreadsheet': 'OFFICE',
    'application/vnd.oasis.opendocument.presentation': 'OFFICE',

    'application/zip': 'ARCHIVE',
    'application/gzip': 'ARCHIVE',
    'application/x-tar': 'ARCHIVE',
    'application/x-bzip2': 'ARCHIVE',
    'application/x-xz': 'ARCHIVE',
    'application/x-7z-compressed': 'ARCHIVE',
    'application/x-rar-compressed': 'ARCHIVE',
    'application/vnd.rar': 'ARCHIVE',
    'application/java-archive': 'ARCHIVE',

    'application/x-executable': 'EXECUTABLE',
    'application/x-sharedlib': 'EXECUTABLE',
    'application/x-msdownload': 'EXECUTABLE',
    'application/x-dosexec': 'EXECUTABLE',
    'application/x-mach-binary': 'EXECUTABLE',
    'application/vnd.microsoft.portable-executable': 'EXECUTABLE',

    'application/json': 'TEXT',
    'application/xml': 'TEXT',
    'application/yaml': 'TEXT',
    'application/javascript': 'TEXT',
    'application/x-sh': 'TEXT',

    'application/ogg': 'MULTIMEDIA',
}

MEDIA_TYPE_BY_MAJOR = {
    'image': 'BITMAP',
    'audio': 'AUDIO',
    'video': 'VIDEO',
    'text': 'TEXT',
    'model': '3D',
}

# --- Metadata handlers ---
BITMAP_MIME_TYPES = [
    'image/jpeg', 'image/png', 'image/gif', 'image/bmp', 'image/tiff', 'image/webp',
]
# Pillow formats exifread knows how to walk
EXIF_FORMATS = {'JPEG', 'TIFF', 'WEBP', 'PNG'}

PSD_MIME_TYPES = ['image/vnd.adobe.photoshop']

MEDIA_MIME_TYPES = [
    'audio/mpeg', 'audio/wav', 'audio/ogg', 'audio/flac', 'audio/mp4', 'audio/aac',
    'video/mp4', 'video/quicktime', 'video/x-matroska', 'video/webm',
    'video/x-msvideo', 'video/mpeg', 'video/ogg', 'application/ogg',
]

# Pillow image mode -> bits per sample
MODE_BITS = {
    '1': 1,
    'I;16': 16,
    'I;16B': 16,
    'I;16L': 16,
    'I': 32,
    'F': 32,
}
DEFAULT_MODE_BITS = 8
