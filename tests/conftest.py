import pytest

from hanzi_ruby_lens.db.persistence import initialize
from hanzi_ruby_lens.domain.models import PlainSegment, Text, Word, WordSegment


@pytest.fixture
def sample_text():
    return Text(
        raw_input="你好世界",
        segments=[
            WordSegment(word=Word(characters="你好", pinyin="nǐhǎo")),
            PlainSegment(text="，"),
            WordSegment(word=Word(characters="世界", pinyin="shìjiè")),
        ],
    )


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture
def conn(db_path):
    connection = initialize(db_path)
    yield connection
    connection.close()
