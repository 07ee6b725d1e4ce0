from noahkit.cmdline import ParsedCommand, parse_command_line


def test_switches_and_params_are_separated():
    parsed = parse_command_line("-x file.lzh other.zip")
    assert parsed.options == ["-x"]
    assert parsed.params == ["file.lzh", "other.zip"]


def test_ignore_first_drops_program_name():
    parsed = parse_command_line("noah.exe -a one two", True)
    assert parsed.options == ["-a"]
    assert parsed.params == ["one", "two"]


def test_first_word_kept_by_default():
    parsed = parse_command_line("noah.exe -a")
    assert parsed.params == ["noah.exe"]
    assert parsed.options == ["-a"]


def test_quoted_words_keep_spaces():
    parsed = parse_command_line('prog "-DC:\\My Files" "a b.zip"', True)
    assert parsed.options == ["-DC:\\My Files"]
    assert parsed.params == ["a b.zip"]


def test_extra_spaces_are_skipped():
    parsed = parse_command_line("   a    b   ")
    assert parsed.params == ["a", "b"]
    assert parsed.options == []


def test_empty_and_blank_input():
    assert parse_command_line("") == ParsedCommand()
    assert parse_command_line("     ") == ParsedCommand()


def test_unterminated_quote_runs_to_end():
    parsed = parse_command_line('"open ended')
    assert parsed.params == ["open ended"]


def test_lone_quote_yields_nothing():
    assert parse_command_line('"') == ParsedCommand()


def test_text_after_closing_quote_starts_new_word():
    parsed = parse_command_line('"a b"c')
    assert parsed.params == ["a b", "c"]


def test_quote_inside_word_is_literal():
    parsed = parse_command_line('a"b c')
    assert parsed.params == ['a"b', "c"]


def test_ignore_first_with_only_program():
    parsed = parse_command_line("prog", True)
    assert parsed.options == [] and parsed.params == []


def test_word_count_matches_simple_split():
    words = ["-a", "x", "-b", "y", "z"]
    parsed = parse_command_line(" ".join(words))
    assert parsed.options + parsed.params == ["-a", "-b", "x", "y", "z"]
    assert len(parsed.options) + len(parsed.params) == len(words)