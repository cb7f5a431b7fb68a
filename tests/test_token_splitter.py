import pytest

from nano_chunker import ConfigurationError, RecursiveCharacterTextSplitter, TextSplitter, TokenTextSplitter
from nano_chunker.chunking import tiktoken_length_function


def test_token_splitter_is_a_text_splitter(fake_encoding):
    assert isinstance(TokenTextSplitter(chunk_size=3, encoding=fake_encoding), TextSplitter)


def test_windows_without_overlap(fake_encoding):
    splitter = TokenTextSplitter(chunk_size=3, encoding=fake_encoding)

    assert splitter.split_text("a b c d e f g") == ["a b c", "d e f", "g"]


def test_windows_with_overlap(fake_encoding):
    splitter = TokenTextSplitter(chunk_size=3, chunk_overlap=1, encoding=fake_encoding)

    assert splitter.split_text("a b c d e f g") == ["a b c", "c d e", "e f g"]


def test_short_text_is_one_chunk(fake_encoding):
    splitter = TokenTextSplitter(chunk_size=10, chunk_overlap=2, encoding=fake_encoding)

    assert splitter.split_text("only three tokens") == ["only three tokens"]
    assert splitter.split_text("") == []


@pytest.mark.parametrize("chunk_overlap", [-1, 3, 4])
def test_rejects_invalid_overlap(fake_encoding, chunk_overlap):
    with pytest.raises(ConfigurationError) as exc_info:
        TokenTextSplitter(chunk_size=3, chunk_overlap=chunk_overlap, encoding=fake_encoding)

    assert exc_info.value.field == "chunk_overlap"


def test_token_length_function(fake_encoding):
    length = tiktoken_length_function(encoding=fake_encoding)

    assert length("a b c") == 3
    assert length("") == 0


def test_token_length_drives_recursive_splitter(fake_encoding):
    splitter = RecursiveCharacterTextSplitter(
        chunk_size=3,
        separators=[" ", ""],
        length_function=tiktoken_length_function(encoding=fake_encoding),
    )

    assert splitter.split_text("a b c d e") == ["a b c", "d e"]


def test_token_splitter_measures_length_in_tokens(fake_encoding):
    splitter = TokenTextSplitter(chunk_size=3, encoding=fake_encoding)

    assert splitter.length_function("alpha beta") == 2
    assert splitter.config.length_function is len
