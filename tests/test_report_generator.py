"""Tests for result summaries and JSON export."""

import json

import pytest

from text_compare import compare_texts, compare_words
from text_compare.report_generator import build_summary, mistake_details, result_to_json


@pytest.fixture
def two_omissions():
    return compare_words(
        ["Con", "mèo", "nhỏ", "ngồi", "trên", "thảm", "xanh"],
        ["Con", "mèo", "ngồi", "trên", "thảm"],
    )


def test_summary_counts(two_omissions):
    summary = build_summary(two_omissions)
    assert summary["total_words"] == 7
    assert summary["correct"] == 5
    assert summary["missed"] == 2
    assert summary["mispronounced"] == 0
    assert summary["substituted"] == 0
    assert summary["inserted"] == 0
    assert summary["accuracy"] == 62.9
    assert summary["category"] == "fair"
    assert summary["category_name"] == "Khá"


def test_summary_word_error_rate(two_omissions):
    assert build_summary(two_omissions)["word_error_rate"] == pytest.approx(2 / 7)


def test_word_error_rate_edge_cases():
    assert build_summary(compare_texts("", ""))["word_error_rate"] == 0.0
    assert build_summary(compare_texts("", "xin chào"))["word_error_rate"] == 1.0
    assert build_summary(compare_texts("xin chào", ""))["word_error_rate"] == 1.0
    assert build_summary(compare_texts("chào", "xin chào bạn nhé"))["word_error_rate"] == 1.0


def test_mistake_details_text(two_omissions):
    rows = mistake_details(two_omissions)
    assert rows[0]["description"] == "Bỏ sót từ 'nhỏ'"
    assert rows[0]["suggestion"] == "Đừng quên đọc từ 'nhỏ'"
    assert rows[0]["kind_name"] == "Bỏ sót"
    assert rows[0]["severity_name"] == "Vừa"
    assert rows[1]["position"] == 6


def test_mistake_text_per_kind():
    result = compare_texts("Con mèo ngồi trên thảm", "Con mẻo ngồi ngồi trên ghế")
    descriptions = [row["description"] for row in mistake_details(result)]
    assert descriptions == [
        "Phát âm 'mèo' thành 'mẻo'",
        "Thêm từ 'ngồi'",
        "Đọc 'thảm' thành 'ghế'",
    ]


def test_result_to_json(two_omissions):
    data = json.loads(result_to_json(two_omissions))
    assert data["feedback_category"] == "fair"
    assert data["total_words"] == 7
    assert data["correct_words"] == 5
    assert [m["kind"] for m in data["mistakes"]] == ["omission", "omission"]
    assert data["mistakes"][0]["expected_word"] == "nhỏ"
    assert data["mistakes"][0]["severity"] == "moderate"
    assert data["accuracy"] == pytest.approx(two_omissions.accuracy)
