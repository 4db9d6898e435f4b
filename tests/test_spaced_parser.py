from notecards.config_models import ParserConfig
from notecards.parsing.spaced import parse_inline, parse_multiline, scan_multiline, split_inline


def _lines(text: str):
    return text.split("\n")


# Inline notation

def test_inline_card_with_id():
    cards = parse_inline("**Flashcard:** Capital of France? :: Paris<!--fc-id:xyz-->")

    assert len(cards) == 1
    assert cards[0].id == "xyz"
    assert cards[0].front == "Capital of France?"
    assert cards[0].back == "Paris"


def test_inline_card_with_hint_and_flag():
    text = "**Flashcard:** 2+2 :: 4 <!--Hint: even number--><!--fc-id:a1--><!--fc-flagged:true-->"
    card = parse_inline(text)[0]

    assert (card.front, card.back) == ("2+2", "4")
    assert card.hint == "even number"
    assert card.id == "a1"
    assert card.flagged is True


def test_inline_finds_every_card_case_insensitively():
    text = (
        "Intro paragraph\n"
        "**Flashcard:** One :: 1\n"
        "text between\n"
        "**flashcard:** Two :: 2\n"
        "**FLASHCARD:** Three :: 3"
    )
    assert [(c.front, c.back) for c in parse_inline(text)] == [("One", "1"), ("Two", "2"), ("Three", "3")]


def test_custom_separator_is_matched_literally():
    text = "**Flashcard:** Q |?| A\n**Flashcard:** X :: Y"

    cards = parse_inline(text, "|?|")
    assert [(c.front, c.back) for c in cards] == [("Q", "A")]


def test_inline_with_empty_back_is_discarded():
    assert parse_inline("**Flashcard:** Q :: ") == []


def test_inline_hint_may_contain_angle_brackets():
    card = parse_inline("**Flashcard:** Q :: A <!--Hint: x > y--><!--fc-id:g1-->")[0]
    assert (card.back, card.hint, card.id) == ("A", "x > y", "g1")


def test_split_inline_uses_first_separator_and_reads_markers_from_the_end():
    assert split_inline("see **Flashcard:** a :: b :: c<!--fc-id:z--><!--fc-flagged:true-->") == (
        "a", "b :: c", None, "z", True
    )
    assert split_inline("**Flashcard:** no separator") is None
    assert split_inline("plain text :: here") is None


# Multiline notation

def test_multiline_card_with_hint_and_id(parser_config):
    text = (
        "**Flashcard:** What is the capital\n"
        "of Spain?\n"
        "??\n"
        "Madrid\n"
        "<!--Hint: starts with M-->\n"
        "<!--fc-id:ml1-->\n"
    )
    cards = parse_multiline(_lines(text), parser_config)

    assert len(cards) == 1
    card = cards[0]
    assert card.front == "What is the capital\nof Spain?"
    assert card.back == "Madrid"
    assert card.hint == "starts with M"
    assert card.id == "ml1"


def test_multiline_body_keeps_paragraphs_until_next_card(parser_config):
    text = (
        "**Flashcard:** Q\n"
        "??\n"
        "para one\n"
        "\n"
        "para two\n"
        "\n"
        "**Flashcard:** Q2\n"
        "??\n"
        "A2"
    )
    cards = parse_multiline(_lines(text), parser_config)
    assert [(c.front, c.back) for c in cards] == [("Q", "para one\n\npara two"), ("Q2", "A2")]


def test_multiline_flag_marker(parser_config):
    text = "**Flashcard:** Q\n??\nA\n<!--fc-id:f1--><!--fc-flagged:true-->"
    card = parse_multiline(_lines(text), parser_config)[0]
    assert (card.id, card.flagged, card.hint) == ("f1", True, None)


def test_multiline_without_separator_is_abandoned(parser_config):
    lines = _lines("**Flashcard:** Q\nno separator here\n")
    assert scan_multiline(lines, 0, parser_config) == (None, 1)
    assert parse_multiline(lines, parser_config) == []


def test_second_marker_before_separator_abandons_first(parser_config):
    text = "**Flashcard:** Orphan\nmore\n**Flashcard:** Real\n??\nAnswer"
    cards = parse_multiline(_lines(text), parser_config)
    assert [(c.front, c.back) for c in cards] == [("Real", "Answer")]


def test_marker_line_with_inline_separator_is_left_to_inline_scanner(parser_config):
    lines = _lines("**Flashcard:** Q :: A\n??\nB")
    assert scan_multiline(lines, 0, parser_config) == (None, 1)


def test_table_in_multiline_back(parser_config):
    text = (
        "**Flashcard:** Compare\n"
        "??\n"
        "| a | b |\n"
        "|---|---|\n"
        "| 1 | 2 |"
    )
    card = parse_multiline(_lines(text), parser_config)[0]
    assert card.back == "| a | b |\n|---|---|\n| 1 | 2 |"


def test_custom_block_separator():
    config = ParserConfig(block_separator="%%")
    text = "**Flashcard:** Q\n??\n%%\nA"
    card = parse_multiline(_lines(text), config)[0]
    assert (card.front, card.back) == ("Q\n??", "A")
