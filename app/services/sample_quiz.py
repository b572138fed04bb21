from app.schemas.quiz import PublicQuestion

# Gemini 키 없이 화면을 확인하기 위한 데모 문제
_SAMPLE_QUESTIONS = [
    {
        "question": "What is the capital of France?",
        "options": ["Berlin", "Madrid", "Paris", "Rome"],
        "correct_option_index": 2,
        "explanation": "Paris is the capital and most populous city of France.",
    },
    {
        "question": "Which planet is known as the Red Planet?",
        "options": ["Earth", "Mars", "Jupiter", "Venus"],
        "correct_option_index": 1,
        "explanation": "Iron oxide on its surface gives Mars its reddish appearance.",
    },
    {
        "question": "What is the largest ocean on Earth?",
        "options": ["Atlantic Ocean", "Indian Ocean", "Arctic Ocean", "Pacific Ocean"],
        "correct_option_index": 3,
        "explanation": "The Pacific Ocean covers more than one-third of the Earth's surface.",
    },
    {
        "question": "What is the chemical symbol for gold?",
        "options": ["Ag", "Au", "Pb", "Fe"],
        "correct_option_index": 1,
        "explanation": "Au comes from the Latin word 'aurum'.",
    },
    {
        "question": "What is the value of $\\sqrt{144}$?",
        "options": ["$10$", "$11$", "$12$", "$14$"],
        "correct_option_index": 2,
        "explanation": "$12 \\times 12 = 144$, so $\\sqrt{144} = 12$.",
    },
]


def get_sample_quiz() -> list[PublicQuestion]:
    """데모 문제 목록"""
    return [PublicQuestion(**question) for question in _SAMPLE_QUESTIONS]
