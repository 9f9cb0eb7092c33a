from flang.span import Position, Span


def test_position_from_char_index_second_line():
    assert Position.from_char_index("hi there\nI am Tom", 12) == Position(line=2, column=3)


def test_position_from_char_index_third_line():
    pos = Position.from_char_index("hi there\nI am Tom\nWho are you???", 25)
    assert pos == Position(line=3, column=7)


def test_position_of_empty_text_is_origin():
    assert Position.from_char_index("", 10) == Position(1, 1)


def test_position_index_past_end_stops_at_last_char():
    text = "hi there\nI am Tom"
    assert Position.from_char_index(text, 1000) == Position.from_char_index(text, len(text) + 1)


def test_span_from_text_uses_both_positions():
    text = "hi there\nI am Tom\nWho are you???"
    span = Span.from_text(text, 12, 25)
    assert span.start == Position.from_char_index(text, 12)
    assert span.end == Position.from_char_index(text, 25)
    assert span == Span(Position(2, 3), Position(3, 7))