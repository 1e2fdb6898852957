"""
Tests for the text and price analyzers — lexical filter, pattern matcher,
price anomaly detector, category rule checker.
"""

from adscreen.core.analyzers import category_rules, lexical_filter, pattern_matcher, price_anomaly
from adscreen.models.moderation_models import FlagKind
from adscreen.rules.defaults import default_rule_data
from adscreen.rules.loader import build_rule_set


# --- Lexical filter ---

def test_lexical_flags_each_matched_term(default_rules, make_submission):
    sub = make_submission(title="Cheap weed", description="also cocaine")
    flags = lexical_filter.analyze(sub, default_rules)
    terms = [f.source for f in flags]
    assert "weed" in terms
    assert "cocaine" in terms
    assert all(f.kind is FlagKind.LEXICAL for f in flags)
    assert all(f.weight == 0.3 for f in flags)


def test_lexical_terms_follow_rule_order(default_rules, make_submission):
    # 'gun' precedes 'cocaine' in the rule table even though it appears later in the text
    sub = make_submission(description="cocaine and a gun")
    terms = [f.source for f in lexical_filter.analyze(sub, default_rules)]
    assert terms.index("gun") < terms.index("cocaine")


def test_lexical_checks_localized_fields(default_rules, make_submission):
    sub = make_submission(title="Car", title_localized="jende")
    flags = lexical_filter.analyze(sub, default_rules)
    assert [f.source for f in flags] == ["jende"]


def test_lexical_is_case_insensitive(default_rules, make_submission):
    sub = make_submission(description="NAZI memorabilia")
    assert "nazi" in [f.source for f in lexical_filter.analyze(sub, default_rules)]


def test_lexical_substring_mode_matches_inside_words(default_rules, make_submission):
    sub = make_submission(title="Classic leather bag")
    assert [f.source for f in lexical_filter.analyze(sub, default_rules)] == ["ass"]


def test_lexical_word_mode_ignores_embedded_terms(make_submission):
    rules = build_rule_set({**default_rule_data(), "lexical_match": "word"})
    assert lexical_filter.analyze(make_submission(title="Classic leather bag"), rules) == []
    flags = lexical_filter.analyze(make_submission(title="Selling a gun"), rules)
    assert [f.source for f in flags] == ["gun"]


def test_lexical_multi_word_term(default_rules, make_submission):
    sub = make_submission(description="Get rich quick with this plan")
    assert "get rich quick" in [f.source for f in lexical_filter.analyze(sub, default_rules)]


def test_lexical_empty_text_no_flags(default_rules, make_submission):
    assert lexical_filter.analyze(make_submission(), default_rules) == []


# --- Pattern matcher ---

def test_pattern_flag_names_one_based_index(default_rules, make_submission):
    sub = make_submission(description="Call now, limited time!")
    flags = pattern_matcher.analyze(sub, default_rules)
    assert [f.detail for f in flags] == ["Suspicious pattern 9"]
    assert flags[0].kind is FlagKind.PATTERN
    assert flags[0].weight == 0.2


def test_pattern_contributes_once_per_pattern(default_rules, make_submission):
    sub = make_submission(description="urgent urgent urgent, act fast, call now")
    assert len(pattern_matcher.analyze(sub, default_rules)) == 1


def test_money_back_guarantee_pattern(default_rules, make_submission):
    sub = make_submission(description="Pay $50 now, full refund guarantee")
    details = [f.detail for f in pattern_matcher.analyze(sub, default_rules)]
    assert "Suspicious pattern 7" in details


def test_pattern_respects_word_boundaries(default_rules, make_submission):
    # 'gunmetal' is not the word 'gun'
    sub = make_submission(description="gunmetal grey paint")
    assert pattern_matcher.analyze(sub, default_rules) == []


def test_pattern_custom_weight(make_submission):
    rules = build_rule_set({"suspicious_patterns": [{"pattern": r"\bwire transfer\b", "weight": 0.35}]})
    flags = pattern_matcher.analyze(make_submission(description="Wire transfer only"), rules)
    assert [f.weight for f in flags] == [0.35]


# --- Price anomaly detector ---

def test_price_below_band_flagged(default_rules, make_submission):
    sub = make_submission(title="Sedan", category="vehicles", price=100)
    flags = price_anomaly.analyze(sub, default_rules)
    assert len(flags) == 1
    assert flags[0].kind is FlagKind.PRICE
    assert flags[0].detail == "Suspicious pricing for category vehicles: $100"
    assert flags[0].weight == 0.1


def test_price_above_band_flagged(default_rules, make_submission):
    sub = make_submission(title="Jacket", category="fashion", price=2500)
    assert len(price_anomaly.analyze(sub, default_rules)) == 1


def test_price_band_is_inclusive(default_rules, make_submission):
    assert price_anomaly.analyze(make_submission(category="fashion", price=5), default_rules) == []
    assert price_anomaly.analyze(make_submission(category="fashion", price=2000), default_rules) == []


def test_category_without_band_exempt_from_band_check(default_rules, make_submission):
    sub = make_submission(title="Plumbing", category="services", price=99_999_999)
    assert price_anomaly.analyze(sub, default_rules) == []


def test_category_without_band_still_gets_heuristics(default_rules, make_submission):
    sub = make_submission(title="Urgent sale", description="leaving country", category="services", price=50)
    flags = price_anomaly.analyze(sub, default_rules)
    assert [f.detail for f in flags] == ["Potential scam: urgent low-price sale"]


def test_brand_new_vehicle_heuristic_is_vehicle_only(default_rules, make_submission):
    vehicle = make_submission(title="Brand new hatchback", category="vehicles", price=4000)
    phone = make_submission(title="Brand new phone", category="digital-goods", price=4000)
    assert [f.detail for f in price_anomaly.analyze(vehicle, default_rules)] == [
        "Suspicious: brand new vehicle at very low price"
    ]
    assert price_anomaly.analyze(phone, default_rules) == []


def test_price_flags_are_additive(default_rules, make_submission):
    sub = make_submission(
        title="Brand new SUV", description="urgent sale", category="vehicles", price=50
    )
    # band + urgent sale + brand new vehicle
    assert len(price_anomaly.analyze(sub, default_rules)) == 3


def test_zero_price_skips_price_checks(default_rules, make_submission):
    sub = make_submission(title="Brand new urgent sale", category="vehicles", price=0)
    assert price_anomaly.analyze(sub, default_rules) == []


def test_heuristics_ignore_localized_text(default_rules, make_submission):
    sub = make_submission(description_localized="urgent sale", category="services", price=10)
    assert price_anomaly.analyze(sub, default_rules) == []


# --- Category rule checker ---

def test_vehicle_missing_documents(default_rules, make_submission):
    sub = make_submission(description="Runs fine, no papers", category="vehicles")
    flags = category_rules.analyze(sub, default_rules)
    assert [f.detail for f in flags] == ["Vehicle: Missing legal documentation"]
    assert flags[0].kind is FlagKind.CATEGORY
    assert flags[0].weight == 0.15
    assert flags[0].source == "vehicle_missing_documents"


def test_rental_scam_needs_both_phrases(default_rules, make_submission):
    only_cash = make_submission(description="Cash only", category="real-estate")
    both = make_submission(title="Urgent", description="Cash only", category="real-estate")
    assert category_rules.analyze(only_cash, default_rules) == []
    assert len(category_rules.analyze(both, default_rules)) == 1


def test_jobs_can_fire_both_rules(default_rules, make_submission):
    sub = make_submission(
        title="No experience required, high pay",
        description="Work from home with guaranteed income",
        category="jobs",
    )
    assert [f.source for f in category_rules.analyze(sub, default_rules)] == [
        "employment_scam",
        "work_from_home_scam",
    ]


def test_massage_service_rule(default_rules, make_submission):
    discreet = make_submission(title="Massage", description="Discreet location", category="services")
    plain = make_submission(title="Sports massage", description="Clinic in town", category="services")
    assert len(category_rules.analyze(discreet, default_rules)) == 1
    assert category_rules.analyze(plain, default_rules) == []


def test_rules_apply_only_to_their_category(default_rules, make_submission):
    sub = make_submission(description="no papers", category="pets")
    assert category_rules.analyze(sub, default_rules) == []


def test_unregistered_category_produces_no_flags(default_rules, make_submission):
    sub = make_submission(description="no papers", category="antiques")
    assert category_rules.analyze(sub, default_rules) == []
