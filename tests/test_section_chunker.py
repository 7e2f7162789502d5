import pytest

from contextpack.chunkers import DEFAULT_TITLE, SectionChunker, clean_content, extract_title
from contextpack.chunkers.section_chunker import split_sections, split_words
from contextpack.index.snapshot import make_document


def test_extract_title_uses_first_top_level_heading():
    assert extract_title("intro\n## Sub\n  # Getting Started  \n# Later") == "Getting Started"


def test_extract_title_defaults_when_no_heading():
    assert extract_title("## Only a subheading\ntext") == DEFAULT_TITLE
    assert extract_title("#NoSpace") == DEFAULT_TITLE


def test_clean_content_collapses_blank_runs():
    assert clean_content("a\n\n\n\nb") == "a\n\nb"
    assert clean_content("a\n \n\t\nb") == "a\n\nb"
    assert clean_content("a\n\nb") == "a\n\nb"
    assert clean_content("\n\n  text  \n") == "text"


def test_split_sections_keeps_heading_with_following_text():
    assert split_sections("# A\ntext\n## B\nmore") == ["# A\ntext\n", "## B\nmore\n"]
    assert split_sections("preamble\n# A\nbody") == ["preamble\n", "# A\nbody\n"]


def test_split_words_packs_greedily():
    pieces = split_words("one two three four five six", 9)
    assert pieces == ["one two", "three", "four five", "six"]
    assert all(len(p) <= 9 for p in pieces)


def test_split_words_keeps_oversized_word_whole():
    long_word = "x" * 25
    assert split_words(f"short {long_word} tail", 10) == ["short", long_word, "tail"]


def test_small_sections_become_one_chunk_each():
    doc = make_document("guide.md", "# Guide\nWelcome text.\n\n## Setup\nInstall steps.")
    chunks = SectionChunker(chunk_size=1000).chunk(doc)

    assert [c.id for c in chunks] == ["guide.md_chunk_0", "guide.md_chunk_1"]
    assert chunks[0].text == "# Guide\nWelcome text.\n\n"
    assert chunks[1].text == "## Setup\nInstall steps.\n"
    assert all(c.title == "Guide" and c.doc_path == "guide.md" for c in chunks)
    assert chunks[1].keywords == ("setup", "install", "steps")


def test_long_section_is_word_split_within_bound():
    body = " ".join(f"word{i:03d}" for i in range(60)).replace("0", "a").replace("1", "b")
    doc = make_document("long.md", "# Long\n" + body)
    chunks = SectionChunker(chunk_size=50).chunk(doc)

    assert len(chunks) > 1
    assert all(len(c.text) <= 50 for c in chunks)
    assert [c.id for c in chunks][:2] == ["long.md_chunk_0_0", "long.md_chunk_0_1"]
    rejoined = " ".join(c.text for c in chunks).split()
    assert rejoined == ("# Long\n" + body).split()


def test_chunk_bound_holds_except_for_single_oversized_words():
    content = "# Title\n" + ("lorem ipsum dolor " * 40) + "\n## Next\n" + "y" * 80 + " end"
    doc = make_document("mixed.md", content)
    chunks = SectionChunker(chunk_size=64).chunk(doc)

    for chunk in chunks:
        assert len(chunk.text) <= 64 or len(chunk.text.split()) == 1


def test_empty_document_has_no_chunks():
    assert SectionChunker().chunk(make_document("empty.md", "")) == []
    assert SectionChunker().chunk(make_document("blank.md", "  \n\n\n  ")) == []


def test_chunk_size_must_be_positive():
    with pytest.raises(ValueError):
        SectionChunker(chunk_size=0)
