from contextpack.utils.keywords import STOP_WORDS, extract_keywords


def test_extract_keywords_lowercases_and_dedupes_in_order():
    text = "The Refund policy: refunds are processed within 14 days. REFUND!"
    assert extract_keywords(text) == ("refund", "policy", "refunds", "processed", "within", "days")


def test_short_words_and_stop_words_are_dropped():
    assert extract_keywords("how do you get the API key") == ()
    assert extract_keywords("this that with have from") == ()
    assert all(word not in STOP_WORDS for word in extract_keywords("some very good billing"))


def test_tokens_glued_to_digits_or_underscores_are_ignored():
    assert extract_keywords("user_name abc123def") == ()
    assert extract_keywords("user-name") == ("user", "name")


def test_query_keywords_use_the_same_rules():
    assert extract_keywords("how do refunds work") == ("refunds", "work")
    assert extract_keywords("") == ()
