"""
Tests for the cleaning steps: duplicates, normalization, missing-value flags, billing sign.
"""
import pandas as pd
import pytest
from conftest import make_records
from healthcare_analytics.models import RecordStore
from healthcare_analytics.transforms.cleaning import (
    MISSING_VALUE,
    clean_records,
    correct_billing_sign,
    find_duplicates,
    flag_missing_values,
    iter_duplicates,
    missing_value_rows,
    normalize_categoricals,
    title_case,
)

# Duplicate detection

def test_duplicates_reports_single_group():
    df = make_records({}, {}, {"name": "Someone Else"})

    dups = find_duplicates(df)

    assert len(dups) == 1
    assert dups.loc[0, "duplicate_count"] == 2
    assert dups.loc[0, "name"] == "Bobby Jackson"
    assert "Someone Else" not in dups["name"].tolist()

def test_duplicates_do_not_modify_input():
    df = make_records({}, {})
    before = df.copy()
    find_duplicates(df)
    pd.testing.assert_frame_equal(df, before)

def test_duplicates_group_null_values_together():
    df = make_records({"name": None}, {"name": None})
    assert find_duplicates(df)["duplicate_count"].tolist() == [2]

def test_duplicates_ignore_data_issue():
    df = make_records({}, {})
    df.loc[0, "data_issue"] = MISSING_VALUE
    assert len(find_duplicates(df)) == 1

def test_iter_duplicates_yields_tuple_and_count():
    df = make_records({}, {}, {}, {"age": 31})

    pairs = list(iter_duplicates(df))

    assert len(pairs) == 1
    values, count = pairs[0]
    assert count == 3
    assert len(values) == 15
    assert values[0] == "Bobby Jackson"

def test_no_duplicates():
    df = make_records({"age": 1}, {"age": 2})
    assert find_duplicates(df).empty
    assert list(iter_duplicates(df)) == []

# Normalization

@pytest.mark.parametrize("raw, expected", [
    ("male", "Male"),
    ("Female", "Female"),
    ("MALE", "Male"),
    ("female", "Female"),
    ("Male", "Male"),
    ("FEMALE", "Female"),
])
def test_gender_variants(raw, expected):
    out = normalize_categoricals(make_records({"gender": raw}))
    assert out.loc[0, "gender"] == expected

@pytest.mark.parametrize("raw", ["other", "M", "UNKNOWN", "non-binary"])
def test_gender_outside_allowed_set_untouched(raw):
    out = normalize_categoricals(make_records({"gender": raw}))
    assert out.loc[0, "gender"] == raw

def test_condition_and_doctor_always_normalized():
    df = make_records({"medical_condition": "HYPERTENSION", "doctor": "dr. JOHN smith"})

    out = normalize_categoricals(df)

    assert out.loc[0, "medical_condition"] == "Hypertension"
    # only the first character is capitalized
    assert out.loc[0, "doctor"] == "Dr. john smith"

def test_title_case_skips_nulls():
    s = pd.Series(["aSTHMA", None, "x"], dtype=object)
    out = title_case(s)
    assert out.tolist()[0] == "Asthma"
    assert out.isna().tolist() == [False, True, False]
    assert out.tolist()[2] == "X"

def test_title_case_allow_list_is_case_insensitive():
    s = pd.Series(["yes", "NO", "maybe"])
    assert title_case(s, {"YES", "no"}).tolist() == ["Yes", "No", "maybe"]

def test_normalize_returns_new_frame():
    df = make_records({"gender": "male"})
    normalize_categoricals(df)
    assert df.loc[0, "gender"] == "male"

# Missing values

def test_flag_missing_values():
    df = make_records({}, {"name": None}, {"age": None}, {"gender": None}, {"medical_condition": None})

    out = flag_missing_values(df)

    assert out["data_issue"].tolist()[:4] == [None, MISSING_VALUE, MISSING_VALUE, MISSING_VALUE]
    # medical condition alone is not a flagged field
    assert out.loc[4, "data_issue"] is None

def test_flag_missing_values_idempotent():
    df = make_records({"name": None}, {})
    once = flag_missing_values(df)
    twice = flag_missing_values(once)
    pd.testing.assert_series_equal(once["data_issue"], twice["data_issue"])
    assert twice.loc[0, "data_issue"] == MISSING_VALUE

def test_flag_keeps_rows():
    df = make_records({"name": None, "age": None, "gender": None})
    assert len(flag_missing_values(df)) == 1

def test_missing_value_rows_include_condition():
    df = make_records({}, {"medical_condition": None}, {"age": None})
    assert missing_value_rows(df).index.tolist() == [1, 2]

# Billing

def test_correct_billing_sign():
    df = make_records({"billing_amount": -500.0}, {"billing_amount": 250.75}, {"billing_amount": 0.0})
    out = correct_billing_sign(df)
    assert out["billing_amount"].tolist() == [500.0, 250.75, 0.0]

def test_correct_billing_sign_idempotent():
    df = make_records({"billing_amount": -12.5}, {"billing_amount": 99.0})
    once = correct_billing_sign(df)
    twice = correct_billing_sign(once)
    pd.testing.assert_series_equal(once["billing_amount"], twice["billing_amount"])
    assert (twice["billing_amount"] >= 0).all()

def test_correct_billing_sign_leaves_null():
    df = make_records({"billing_amount": None})
    assert pd.isna(correct_billing_sign(df).loc[0, "billing_amount"])

# Orchestration

def test_clean_records_end_to_end():
    df = make_records({"billing_amount": -500.0, "gender": "FEMALE", "name": None})

    out, stats = clean_records(df)

    assert out.loc[0, "billing_amount"] == 500.0
    assert out.loc[0, "gender"] == "Female"
    assert out.loc[0, "data_issue"] == MISSING_VALUE
    assert stats.corrected_billing == 1
    assert stats.flagged_missing == 1
    assert stats.normalized["gender"] == 1

def test_clean_records_stats(records):
    out, stats = clean_records(records)

    assert stats.rows == 4
    assert stats.duplicate_groups == 0
    assert stats.normalized == {"gender": 2, "medical_condition": 2, "doctor": 3}
    assert stats.discharge_before_admission == 0
    assert (out["billing_amount"] >= 0).all()
    assert len(out) == len(records)

def test_clean_records_counts_swapped_dates():
    df = make_records({"date_of_admission": "2024-05-10", "discharge_date": "2024-05-01"})
    _, stats = clean_records(df)
    assert stats.discharge_before_admission == 1

def test_clean_records_is_stable_on_second_pass(records):
    once, _ = clean_records(records)
    twice, stats = clean_records(once)
    pd.testing.assert_frame_equal(once, twice)
    assert stats.corrected_billing == 0

def test_steps_commute(records):
    forward = correct_billing_sign(flag_missing_values(normalize_categoricals(records)))
    backward = normalize_categoricals(flag_missing_values(correct_billing_sign(records)))
    pd.testing.assert_frame_equal(forward, backward)

# Record store

def test_record_store_versions(records):
    store = RecordStore(records)
    nxt = store.apply("billing", correct_billing_sign)

    assert store.version == 0 and nxt.version == 1
    assert nxt.history == ("billing",)
    assert store.frame.loc[0, "billing_amount"] == -500.0
    assert nxt.frame.loc[0, "billing_amount"] == 500.0
    assert len(nxt) == 4

def test_record_store_rejects_dropped_rows(records):
    with pytest.raises(ValueError):
        RecordStore(records).apply("drop", lambda df: df.iloc[1:])
