import pytest

from nano_chunker import RecursiveCharacterTextSplitter


class FakeEncoding:
    """Whitespace tokenizer standing in for a tiktoken encoding."""

    def encode(self, text):
        return text.split()

    def decode(self, tokens):
        return " ".join(tokens)


SAMPLE_TEXT = (
    "The quick brown fox jumps over the lazy dog.\n\n"
    "Pack my box with five dozen liquor jugs.\nHow vexingly quick daft zebras jump!\n\n"
    "Sphinx of black quartz, judge my vow."
)


@pytest.fixture
def fake_encoding():
    return FakeEncoding()


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def make_splitter():
    def _make(**kwargs):
        return RecursiveCharacterTextSplitter(**kwargs)
    return _make
