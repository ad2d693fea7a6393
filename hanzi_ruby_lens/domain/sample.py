from hanzi_ruby_lens.domain.models import PlainSegment, Text, Word, WordSegment

# Shown by the reader until the user saves a text of their own. Covers
# multi-character words, single-character words, punctuation, digits and
# long pinyin.
_SAMPLE_WORDS_AND_PLAIN = [
    ("我", "wǒ"),
    ("現在", "xiànzài"),
    ("覺得", "juéde"),
    ("學習", "xuéxí"),
    ("知識", "zhīshì"),
    ("是", "shì"),
    ("很", "hěn"),
    ("重要", "zhòngyào"),
    ("的", "de"),
    "。",
    ("每", "měi"),
    ("天", "tiān"),
    ("閱讀", "yuèdú"),
    " 30 ",
    ("分鐘", "fēnzhōng"),
    "，",
    ("可以", "kěyǐ"),
    ("增長", "zēngzhǎng"),
    ("見識", "jiànshì"),
    "！",
    ("這些", "zhèxiē"),
    ("裝飾", "zhuāngshì"),
    ("窗戶", "chuānghu"),
    ("雙", "shuāng"),
    ("莊嚴", "zhuāngyán"),
    "。",
]


def sample_text() -> Text:
    segments = []
    for item in _SAMPLE_WORDS_AND_PLAIN:
        if isinstance(item, str):
            segments.append(PlainSegment(text=item))
        else:
            characters, pinyin = item
            segments.append(WordSegment(word=Word(characters=characters, pinyin=pinyin)))

    text = Text(raw_input="", segments=segments)
    return text.model_copy(update={"raw_input": text.reconstructed()})
