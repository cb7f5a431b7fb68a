import logging


def test_merge_packs_fragments_up_to_chunk_size(make_splitter):
    splitter = make_splitter(chunk_size=7, separators=[" ", ""])

    assert splitter._merge_splits(["one", "two", "three"], " ") == ["one two", "three"]


def test_merge_counts_separator_length(make_splitter):
    assert make_splitter(chunk_size=5)._merge_splits(["ab", "cd"], "--") == ["ab", "cd"]
    assert make_splitter(chunk_size=6)._merge_splits(["ab", "cd"], "--") == ["ab--cd"]


def test_merge_with_empty_separator_concatenates(make_splitter):
    splitter = make_splitter(chunk_size=4)

    assert splitter._merge_splits(["ab", "cd", "e"], "") == ["abcd", "e"]


def test_merge_keeps_oversized_fragment_alone(make_splitter, caplog):
    splitter = make_splitter(chunk_size=3)

    with caplog.at_level(logging.WARNING, logger="nano-chunker"):
        result = splitter._merge_splits(["abcdef", "g"], "")

    assert result == ["abcdef", "g"]
    assert "超过了设定的块大小" in caplog.text


def test_merge_drops_chunks_that_strip_to_empty(make_splitter):
    splitter = make_splitter(chunk_size=3)

    assert splitter._merge_splits(["  ", "  ", "ab"], "") == ["ab"]


def test_merge_strips_chunk_edges(make_splitter):
    splitter = make_splitter(chunk_size=20)

    assert splitter._merge_splits([" alpha", "beta "], "\n") == ["alpha\nbeta"]


def test_merge_empty_input(make_splitter):
    assert make_splitter(chunk_size=3)._merge_splits([], " ") == []


def test_join_docs_returns_none_for_blank(make_splitter):
    splitter = make_splitter()

    assert splitter._join_docs([" ", "\n"], "") is None
    assert splitter._join_docs(["a", "b"], "-") == "a-b"
