import math
from collections import Counter

import pytest

from bayesdict.dictionary import DictionaryConfig, TokenDictionary, TokenEntry


def _usable_weight_sum(dictionary):
    return sum(entry.weight for entry in dictionary.dump().values() if entry.weight != 0)


def test_empty_dictionary_matches_half():
    dictionary = TokenDictionary()
    assert dictionary.match({"foo": 1}) == 0.5
    assert dictionary.document_count == 0
    assert dictionary.token_count == 0
    assert dictionary.usable_token_count == 0


def test_weights_and_match_scenario():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"alpha": 10, "bet": 1})

    entries = dictionary.dump()
    assert dictionary.usable_token_count == 11
    assert dictionary.token_count == 11
    assert entries["alpha"] == TokenEntry(count=10, weight=pytest.approx(10 / 11))
    assert entries["bet"].weight == pytest.approx(1 / 11)

    probability = dictionary.match({"alpha": 1})
    assert probability == pytest.approx(1 / (1 + 1 / 11))
    assert probability == pytest.approx(0.9167, abs=1e-4)


def test_query_counts_do_not_change_score():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"alpha": 10, "bet": 1})
    assert dictionary.match({"alpha": 1}) == dictionary.match({"alpha": 40})


def test_short_token_is_never_weighted():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"ab": 1000, "gamma": 2, "delta": 2})

    assert dictionary.weight("ab") == 0.0
    assert dictionary.dump()["ab"].count == 1000
    assert dictionary.usable_token_count == 4
    assert dictionary.token_count == 1004
    assert dictionary.match({"ab": 1}) == 0.5


def test_long_token_is_filtered_by_code_points():
    dictionary = TokenDictionary(DictionaryConfig(maximal_token_length=4))
    # Four code points but eight UTF-8 bytes.
    dictionary.add_tokens({"ключ": 1, "toolong": 1})
    assert dictionary.weight("ключ") == 1.0
    assert dictionary.weight("toolong") == 0.0


def test_zero_count_tokens_are_skipped():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"alpha": 0, "gamma": 3})
    assert "alpha" not in dictionary
    assert len(dictionary) == 1
    assert dictionary.document_count == 1


def test_negative_count_is_rejected_without_side_effects():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"gamma": 3})
    with pytest.raises(ValueError):
        dictionary.add_tokens({"alpha": 2, "gamma": -1})
    assert "alpha" not in dictionary
    assert dictionary.document_count == 1


def test_no_usable_tokens_gives_zero_weights():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"ab": 3, "x": 1})
    assert dictionary.usable_token_count == 0
    assert all(entry.weight == 0 for entry in dictionary.dump().values())
    assert dictionary.match({"ab": 1, "x": 1}) == 0.5


def test_single_usable_token_matches_with_certainty():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"alpha": 5, "ab": 2})
    assert dictionary.weight("alpha") == 1.0
    assert dictionary.match({"alpha": 1}) == 1.0
    assert dictionary.match({"other": 1}) == 0.5


def test_weights_sum_to_one_after_mutations():
    dictionary = TokenDictionary()
    docs = [
        Counter({"apple": 3, "banana": 2, "ox": 9}),
        Counter({"banana": 1, "cherry": 4}),
        Counter({"apple": 1, "durian": 7, "elderberry": 2}),
    ]
    for doc in docs:
        dictionary.add_tokens(doc)
        assert _usable_weight_sum(dictionary) == pytest.approx(1.0, abs=1e-9)

    dictionary.remove_tokens(docs[1])
    assert _usable_weight_sum(dictionary) == pytest.approx(1.0, abs=1e-9)
    dictionary.remove_tokens(docs[0])
    dictionary.remove_tokens(docs[2])
    assert len(dictionary) == 0
    assert dictionary.usable_token_count == 0


def test_remove_restores_previous_state():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"apple": 3, "banana": 2})
    before = dict(dictionary.dump())

    extra = {"apple": 4, "cherry": 5}
    dictionary.add_tokens(extra)
    dictionary.remove_tokens(extra)

    assert dictionary.document_count == 1
    assert "cherry" not in dictionary
    assert dict(dictionary.dump()) == before


def test_remove_ignores_unknown_tokens_and_deletes_exhausted_entries():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"apple": 3, "banana": 2})
    dictionary.remove_tokens({"apple": 5, "missing": 1})
    assert "apple" not in dictionary
    assert "missing" not in dictionary
    assert dictionary.dump()["banana"].count == 2


def test_document_count_is_clamped_at_zero():
    dictionary = TokenDictionary()
    dictionary.remove_tokens({"apple": 1})
    assert dictionary.document_count == 0
    dictionary.add_tokens({"apple": 1})
    assert dictionary.document_count == 1


def test_match_bounds():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"apple": 3, "banana": 2, "cherry": 1})
    for query in ({"apple": 1}, {"banana": 1, "cherry": 1}, {"apple": 1, "banana": 1, "cherry": 1}):
        assert 0.0 < dictionary.match(query) < 1.0
    assert dictionary.match({"durian": 1}) == 0.5


def test_match_uses_log_of_complements():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"apple": 3, "banana": 2, "cherry": 5})
    wa, wb = dictionary.weight("apple"), dictionary.weight("banana")
    expected = 1 / (1 + math.exp(math.log(1 - wa) + math.log(1 - wb)))
    assert dictionary.match({"apple": 1, "banana": 1, "zzz": 1}) == pytest.approx(expected)


def test_document_frequency_filter():
    dictionary = TokenDictionary(DictionaryConfig(use_document_frequency_filter=True, minimal_frequency_in_documents=0.5))
    dictionary.add_tokens({"common": 1, "rare": 1})
    dictionary.add_tokens({"common": 1})
    dictionary.add_tokens({"common": 1})
    dictionary.add_tokens({"common": 1})

    # rare: 1 / 4 documents < 0.5
    assert dictionary.weight("rare") == 0.0
    assert dictionary.weight("common") == 1.0
    assert dictionary.usable_token_count == 4


def test_config_setters_recount():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"ab": 2, "gamma": 2})
    assert dictionary.weight("ab") == 0.0

    dictionary.minimal_token_length = 2
    assert dictionary.minimal_token_length == 2
    assert dictionary.weight("ab") == pytest.approx(0.5)

    dictionary.maximal_token_length = 2
    assert dictionary.weight("gamma") == 0.0
    assert dictionary.weight("ab") == 1.0

    dictionary.use_document_frequency_filter = True
    dictionary.minimal_frequency_in_documents = 1.0
    # both tokens have count 2 over 1 document
    assert dictionary.weight("ab") == 1.0
    dictionary.document_count = 10
    assert dictionary.weight("ab") == 0.0
    assert dictionary.usable_token_count == 0


def test_invalid_config_setter_leaves_state():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"gamma": 2})
    with pytest.raises(ValueError):
        dictionary.maximal_token_length = 1
    with pytest.raises(ValueError):
        dictionary.document_count = -1
    assert dictionary.maximal_token_length == 16
    assert dictionary.weight("gamma") == 1.0


def test_dump_is_read_only_snapshot():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"gamma": 2})
    snapshot = dictionary.dump()
    with pytest.raises(TypeError):
        snapshot["gamma"] = TokenEntry(count=1)
    dictionary.add_tokens({"delta": 2})
    assert "delta" not in snapshot


def test_input_multiset_is_not_mutated():
    doc = Counter({"apple": 3})
    dictionary = TokenDictionary()
    dictionary.add_tokens(doc)
    dictionary.remove_tokens(doc)
    assert doc == Counter({"apple": 3})


def test_explicit_recount_is_idempotent():
    dictionary = TokenDictionary()
    dictionary.add_tokens({"apple": 3, "ab": 2, "cherry": 1})
    before = dict(dictionary.dump())
    dictionary.recount()
    dictionary.recount()
    assert dict(dictionary.dump()) == before
