# figextract/core/processor/fig_helper/fig_constants.py
"""
Figma .fig Container Constants

Defines magic signatures, framing sizes, blob opcodes and record sizes
for the .fig binary container and its geometry blobs.

Container Structure:
- Magic header (8 bytes): "fig-kiwi" (Figma) or "fig-jam." (FigJam)
- Version (4 bytes, little-endian u32)
- Chunks: repeated {length (u32 LE), payload (length bytes)}
  - chunk 0: compressed Kiwi schema
  - chunk 1: compressed Kiwi message (nodeChanges + blobs)
  - chunk 2+: embedded images (PNG/JPEG, stored as-is)

Large files are shipped as a ZIP archive wrapping a single canvas.fig entry.
"""

# ==========================================================================
# Container Signatures
# ==========================================================================

FIGMA_MAGIC = b'fig-kiwi'
FIGJAM_MAGIC = b'fig-jam.'
MAGIC_SIZE = 8

ZIP_MAGIC = b'PK'
CANVAS_ENTRY_NAME = 'canvas.fig'

# Image payloads that are stored already-compressed
PNG_MAGIC = bytes([137, 80])
JPEG_MAGIC = bytes([255, 216])


# ==========================================================================
# Chunk Framing
# ==========================================================================

VERSION_SIZE = 4
CHUNK_HEADER_SIZE = 4
MIN_FILE_SIZE = MAGIC_SIZE + VERSION_SIZE  # 12
MIN_CHUNK_COUNT = 2  # schema + data

SCHEMA_CHUNK_INDEX = 0
DATA_CHUNK_INDEX = 1


# ==========================================================================
# Blob Substitution
# ==========================================================================

BLOB_FIELD_SUFFIX = 'Blob'

BLOB_TYPE_COMMANDS = 'commands'
BLOB_TYPE_VECTOR_NETWORK = 'vectorNetwork'


# ==========================================================================
# Path Command Opcodes
# ==========================================================================

# opcode -> (tag, float count)
PATH_COMMANDS = {
    0: ('Z', 0),  # close
    1: ('M', 2),  # move to x, y
    2: ('L', 2),  # line to x, y
    3: ('Q', 4),  # quadratic cx, cy, x, y
    4: ('C', 6),  # cubic cx1, cy1, cx2, cy2, x, y
}


# ==========================================================================
# Vector Network Layout
# ==========================================================================

VERTEX_RECORD_SIZE = 12          # styleID u32, x f32, y f32
SEGMENT_RECORD_SIZE = 28         # styleID, start{vertex,dx,dy}, end{vertex,dx,dy}
REGION_HEADER_SIZE = 8           # packed styleID/windingRule u32, loopCount u32
LOOP_HEADER_SIZE = 4             # indexCount u32

WINDING_RULE_BIT = 0x01
WINDING_NONZERO = 'NONZERO'
WINDING_ODD = 'ODD'


# ==========================================================================
# Transform Matrix
# ==========================================================================

TRANSFORM_KEY = 'transform'
MATRIX_FIELDS = ('m00', 'm01', 'm02', 'm10', 'm11', 'm12')
SCALE_EPSILON = 1e-10


# ==========================================================================
# Images
# ==========================================================================

IMAGE_FIELDS = ('image', 'imageThumbnail')
IMAGE_HASH_KEY = 'hash'
IMAGE_FILENAME_KEY = 'filename'
IMAGE_DIRECTORY = 'images'


# ==========================================================================
# Document Tree
# ==========================================================================

ROOT_GUID = '0:0'
