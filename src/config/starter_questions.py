"""Starter questions shown when the chat widget opens."""

from src.config.constants import Language

STARTER_QUESTIONS: dict[str, tuple[str, ...]] = {
    Language.ENGLISH.value: (
        "How is overtime calculated?",
        "What are legal working hours?",
        "How much leave do I get?",
        "What is the minimum wage in Malaysia?",
        "Can my employer hold my passport?",
    ),
    Language.MALAY.value: (
        "Bagaimana pengiraan lebih masa?",
        "Apakah waktu kerja yang sah?",
        "Berapa hari cuti yang saya dapat?",
        "Berapakah gaji minimum di Malaysia?",
        "Bolehkah majikan saya memegang pasport saya?",
    ),
    Language.NEPALI.value: (
        "ओभरटाइम कसरी गणना गरिन्छ?",
        "कानुनी काम गर्ने घण्टा के हुन्?",
        "मलाई कति बिदा मिल्छ?",
        "मलेसियामा न्यूनतम पारिश्रमिक कति हो?",
        "के मेरो नियोक्ताले मेरो राहदानी राख्न सक्छ?",
    ),
    Language.HINDI.value: (
        "ओवरटाइम की गणना कैसे की जाती है?",
        "कानूनी कार्य घंटे क्या हैं?",
        "मुझे कितनी छुट्टी मिलती है?",
        "मलेशिया में न्यूनतम वेतन कितना है?",
        "क्या मेरा नियोक्ता मेरा पासपोर्ट रख सकता है?",
    ),
    Language.BENGALI.value: (
        "ওভারটাইম কিভাবে গণনা করা হয়?",
        "আইনি কাজের সময় কি?",
        "আমি কত ছুটি পাব?",
        "মালেশিয়ায় ন্যূনতম মজুরি কত?",
        "আমার নিয়োগকর্তা কি আমার পাসপোর্ট রাখতে পারে?",
    ),
}


def get_starter_questions(language: str | None) -> list[str]:
    """Starter questions for a language, English for unknown tags."""
    questions = STARTER_QUESTIONS.get(language or "", STARTER_QUESTIONS[Language.ENGLISH.value])
    return list(questions)
