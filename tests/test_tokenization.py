from markup_metrics.tokenization import count_words, tokenize_words


def test_tokenize_words_keeps_punctuation_and_offsets():
    text = "The cat  sat.\nIt's sunny!"
    tokens = tokenize_words(text)

    assert [token.text for token in tokens] == ["The", "cat", "sat.", "It's", "sunny!"]
    assert tokens[0].start_char == 0
    assert tokens[0].end_char == 3
    assert text[tokens[2].start_char : tokens[2].end_char] == "sat."


def test_count_words_ignores_surrounding_whitespace():
    assert count_words("") == 0
    assert count_words("   \n\t ") == 0
    assert count_words("  one two\n three  ") == 3
