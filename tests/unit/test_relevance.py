"""Tests for the relevance filter and statistics classifier."""

import pytest

from src.config.keywords import GREETING_PREFIXES, RELEVANCE_KEYWORDS
from src.services.triage.classifier import is_relevant, is_statistics_question


# ==========================================
#  RELEVANCE FILTER
# ==========================================


class TestIsRelevant:
    @pytest.mark.parametrize(
        "question",
        [
            "hi",
            "Hello!",
            "  HEY there  ",
            "apa khabar",
            "नमस्ते",
            "হ্যালো",
        ],
    )
    def test_short_greetings_accepted(self, question):
        assert is_relevant(question) is True

    @pytest.mark.parametrize(
        "question",
        [
            "My employer did not pay my salary this month",
            "Majikan saya tidak bayar gaji saya bulan ini",
            "मेरो मालिकले तलब दिएन, के गर्ने?",
            "मेरे मालिक ने मुझे वेतन नहीं दिया है",
            "আমার নিয়োগকর্তা আমার বেতন দেয়নি এখনও পর্যন্ত",
        ],
    )
    def test_domain_keywords_accepted(self, question):
        assert is_relevant(question) is True

    @pytest.mark.parametrize(
        "question",
        [
            "Tell me a joke",
            "What is the weather today?",
            "What is the capital of France?",
            "Recommend a good movie to watch tonight",
            "Who won the football match yesterday?",
        ],
    )
    def test_off_topic_rejected(self, question):
        assert is_relevant(question) is False

    def test_greeting_prefix_ignored_for_long_messages(self):
        # Four words, so the greeting shortcut does not apply and no keyword matches
        assert is_relevant("what is the capital") is False

    def test_keyword_match_is_case_insensitive(self):
        assert is_relevant("Explain the EMPLOYMENT ACT to me please") is True

    def test_empty_question_rejected(self):
        assert is_relevant("   ") is False

    @pytest.mark.parametrize("keyword", RELEVANCE_KEYWORDS)
    def test_every_keyword_accepted(self, keyword):
        assert is_relevant(keyword) is True

    @pytest.mark.parametrize("greeting", GREETING_PREFIXES)
    def test_every_greeting_accepted(self, greeting):
        assert is_relevant(greeting) is True


# ==========================================
#  STATISTICS CLASSIFIER
# ==========================================


class TestIsStatisticsQuestion:
    @pytest.mark.parametrize(
        "question",
        [
            "Show me migration statistics",
            "What is the number of foreign staff?",
            "How many migrant workers are there?",
            "how many workers does Sabah have",
            "Are there many workers in Penang?",
            "workers in Kuala Lumpur",
        ],
    )
    def test_statistics_questions(self, question):
        assert is_statistics_question(question) is True

    @pytest.mark.parametrize(
        "question",
        [
            "How is overtime calculated?",
            "Can my employer keep my passport?",
            "workers rights",
        ],
    )
    def test_non_statistics_questions(self, question):
        assert is_statistics_question(question) is False
