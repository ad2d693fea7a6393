from hanzi_ruby_lens.domain.models import (
    PlainSegment,
    Text,
    TextSegment,
    Word,
    WordSegment,
)

__all__ = ["PlainSegment", "Text", "TextSegment", "Word", "WordSegment"]
