from app.correction.exceptions import ChunkingConfigurationError


def split_into_chunks(text: str, max_chunk_size: int) -> list[str]:
    """Split text into pieces of at most `max_chunk_size` characters.

    Cuts prefer the last space before the size limit and fall back to a hard
    cut mid-word. The whitespace run after each cut is skipped and is not part
    of any chunk, so joining the chunks drops the spacing at cut points.

    Raises:
        ChunkingConfigurationError: if max_chunk_size is not positive.
    """
    if max_chunk_size <= 0:
        raise ChunkingConfigurationError(
            f"max_chunk_size must be > 0, got {max_chunk_size}"
        )
    if not text:
        return []

    chunks: list[str] = []
    length = len(text)
    start = 0
    while start < length:
        end = min(length, start + max_chunk_size)
        if end < length:
            last_space = text.rfind(" ", start, end)
            if last_space > start:
                end = last_space
        if end == start:
            end = min(length, start + 1)

        chunks.append(text[start:end])
        start = end
        while start < length and text[start].isspace():
            start += 1
    return chunks
