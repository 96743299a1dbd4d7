#!/usr/bin/env python3
"""
Compression utilities for tunnel payloads

Handles zlib compression/decompression of payloads before they are encoded
for chat. The codec itself never looks inside the bytes it is handed.
"""

import zlib
import logging
from typing import Optional

logger = logging.getLogger(__name__)


def compress_data(data: bytes, level: int = 6) -> bytes:
    """Compress data using zlib

    Args:
        data: Raw data to compress
        level: Compression level (1-9, default 6)

    Returns:
        Compressed data
    """
    compressed = zlib.compress(data, level)
    if data:
        logger.debug(f"Compressed {len(data)} bytes -> {len(compressed)} bytes ({len(compressed)/len(data)*100:.1f}%)")
    return compressed


def decompress_data(data: bytes, max_size: int = 10 * 1024 * 1024) -> Optional[bytes]:
    """Decompress zlib-compressed data

    Args:
        data: Compressed data
        max_size: Maximum allowed decompressed size (safety limit)

    Returns:
        Decompressed data or None on failure
    """
    decompressor = zlib.decompressobj()
    result = bytearray()
    chunk_size = 8192

    for i in range(0, len(data), chunk_size):
        chunk = data[i:i + chunk_size]
        try:
            # Bound each step so a zip bomb cannot allocate past the limit
            result += decompressor.decompress(chunk, max_size + 1 - len(result))
        except zlib.error as e:
            logger.error(f"Zlib decompression error at chunk {i//chunk_size}: {e}")
            return None

        if len(result) > max_size or decompressor.unconsumed_tail:
            logger.error(f"Decompressed data exceeds size limit: {max_size}")
            return None

    try:
        result += decompressor.flush()
    except zlib.error as e:
        logger.error(f"Zlib finalization error: {e}")
        return None

    if not decompressor.eof:
        logger.error("Zlib stream is truncated")
        return None
    if len(result) > max_size:
        logger.error(f"Decompressed data exceeds size limit: {len(result)} > {max_size}")
        return None

    logger.debug(f"Decompressed {len(data)} bytes -> {len(result)} bytes")
    return bytes(result)


def is_compressed(data: bytes) -> bool:
    """Check if data appears to be zlib compressed

    Args:
        data: Data to check

    Returns:
        True if data appears to be zlib compressed
    """
    if len(data) < 2:
        return False

    # zlib header is 2 bytes: CMF (Compression Method and Flags) + FLG (Flags)
    cmf = data[0]
    flg = data[1]

    # Deflate method with a valid header checksum
    return (cmf & 0x0F) == 0x08 and (cmf * 256 + flg) % 31 == 0


def compress_if_beneficial(data: bytes, min_ratio: float = 0.9) -> Optional[bytes]:
    """Compress data only if it provides good compression ratio

    Args:
        data: Data to potentially compress
        min_ratio: Only compress if compressed size / original size < min_ratio

    Returns:
        Compressed data if beneficial, otherwise None
    """
    if len(data) < 100:  # Don't compress very small data
        return None

    compressed = compress_data(data)
    ratio = len(compressed) / len(data)

    if ratio < min_ratio:
        logger.debug(f"Compression beneficial: {ratio:.2f} ratio")
        return compressed

    logger.debug(f"Compression not beneficial: {ratio:.2f} ratio")
    return None
