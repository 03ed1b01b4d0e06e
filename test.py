# test.py
"""
FigHandler Test Script - read_container 테스트

Usage:
    python test.py path/to/design.fig
"""
import logging
import sys

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def main():
    from figextract import FigHandler
    from figextract.core.processor.fig_helper import decompress_chunk, describe_image_chunks

    file_path = sys.argv[1] if len(sys.argv) > 1 else "design.fig"
    handler = FigHandler()

    print("=" * 80)
    print("read_container 테스트")
    print("=" * 80)

    with open(file_path, "rb") as f:
        file_type, stream = handler.read_container(f.read())

    print(f"File type: {file_type.value}")
    print(f"Version: {stream.version}")
    print(f"Total chunks: {len(stream.chunks)}")

    schema = decompress_chunk(stream.schema_chunk)
    message = decompress_chunk(stream.data_chunk)
    print(f"Schema: {len(stream.schema_chunk)} -> {len(schema)} bytes")
    print(f"Message: {len(stream.data_chunk)} -> {len(message)} bytes")

    for info in describe_image_chunks(stream):
        print(f"\n--- Chunk {info.index} ---")
        print(f"Format: {info.format}, size: {info.width}x{info.height}, {info.size_bytes} bytes")


if __name__ == "__main__":
    main()
