from app.domain.similarity import PARTIAL_WORD_SIMILARITY, semantic_similarity


def test_anchor_in_first_argument():
    assert semantic_similarity("sewing", "tailoring") == 0.95


def test_anchor_in_second_argument():
    assert semantic_similarity("tailoring", "sewing") == 0.95


def test_first_related_term_in_table_order_wins():
    # embroidery (0.8) is listed before alterations (0.85)
    assert semantic_similarity("sewing", "embroidery alterations") == 0.8


def test_teaching_training():
    assert semantic_similarity("teaching", "training") == 0.85


def test_partial_word_fallback():
    assert semantic_similarity("home baking", "baking classes") == PARTIAL_WORD_SIMILARITY


def test_short_tokens_are_ignored():
    assert semantic_similarity("car", "cart") == 0.0


def test_unrelated_skills():
    assert semantic_similarity("gardening", "plumbing") == 0.0


def test_first_matching_anchor_wins_over_a_better_later_one():
    # sewing->embroidery (0.8) is found before cooking->culinary (0.95)
    assert semantic_similarity("sewing cooking", "embroidery culinary") == 0.8
