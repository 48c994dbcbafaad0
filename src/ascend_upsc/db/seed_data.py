# src/ascend_upsc/db/seed_data.py
"""
首次初始化时写入数据库的参考数据和示例数据。
"""

SUBJECTS = [
    "History",
    "Geography",
    "Economics",
    "Political Science",
    "Science & Technology",
    "Environment & Ecology",
    "Current Affairs",
]

# subject -> topics
TOPICS = {
    "History": ["Ancient India", "Medieval India", "Modern India", "World History"],
    "Geography": ["Physical Geography", "Indian Geography", "World Geography", "Economic Geography"],
    "Economics": ["Microeconomics", "Macroeconomics", "Indian Economy", "International Economics"],
    "Political Science": ["Indian Constitution", "Governance", "International Relations", "Political Theory"],
    "Science & Technology": ["Physics", "Chemistry", "Biology", "Technology & Innovation"],
    "Environment & Ecology": ["Ecosystem", "Climate Change", "Biodiversity", "Environmental Policies"],
    "Current Affairs": ["National", "International", "Economy", "Science & Tech"],
}

# subject -> topic -> subtopics（目前只有部分学科有细分）
SUBTOPICS = {
    "History": {
        "Ancient India": ["Indus Valley Civilization", "Vedic Period", "Buddhism & Jainism", "Mauryan Empire"],
        "Medieval India": ["Delhi Sultanate", "Mughal Empire", "Vijayanagara Empire", "Medieval Art & Architecture"],
        "Modern India": ["British Rule", "Freedom Movement", "Post-Independence India", "Social Reforms"],
        "World History": ["Renaissance", "World Wars", "Cold War", "Decolonization"],
    },
    "Economics": {
        "Microeconomics": ["Market Structures", "Consumer Theory", "Production Theory", "Price Determination"],
        "Macroeconomics": ["National Income", "Inflation", "Monetary Policy", "Fiscal Policy"],
        "Indian Economy": ["Economic Reforms", "Agriculture", "Industry", "Service Sector"],
        "International Economics": [
            "Trade Theory", "Balance of Payments", "Exchange Rates", "International Organizations"
        ],
    },
}

SAMPLE_TEST = {
    "title": "Economics BASICS Sample Test",
    "description": "A sample test covering fundamental economics concepts",
    "filename": "economics_basics.txt",
}

SAMPLE_QUESTIONS = [
    {
        "question_text": "Which of the following is NOT a measure of national income?",
        "options": [
            "Gross Domestic Product (GDP)",
            "Net National Product (NNP)",
            "Consumer Price Index (CPI)",
            "Gross National Product (GNP)",
        ],
        "correct_option": "C",
        "explanation": (
            "Consumer Price Index (CPI) is a measure of inflation, not national income. "
            "GDP, NNP, and GNP are all measures of national income."
        ),
        "subject": "Economics",
        "topic": "Macroeconomics",
    },
    {
        "question_text": "Which of the following is the apex banking institution in India?",
        "options": ["State Bank of India", "Reserve Bank of India", "NITI Aayog", "Finance Ministry"],
        "correct_option": "B",
        "explanation": (
            "The Reserve Bank of India (RBI) is the central bank and apex monetary authority of India, "
            "established on April 1, 1935."
        ),
        "subject": "Economics",
        "topic": "Indian Economy",
    },
    {
        "question_text": "Fiscal policy in India is formulated by:",
        "options": [
            "Reserve Bank of India",
            "Ministry of Finance",
            "NITI Aayog",
            "Securities and Exchange Board of India",
        ],
        "correct_option": "B",
        "explanation": (
            "Fiscal policy, which involves government revenue and expenditure decisions, "
            "is formulated by the Ministry of Finance in India."
        ),
        "subject": "Economics",
        "topic": "Macroeconomics",
    },
    {
        "question_text": "In economics, what does \"Gresham's Law\" state?",
        "options": [
            "Good money drives out bad money",
            "Bad money drives out good money",
            "Inflation rises as unemployment falls",
            "Prices rise when supply exceeds demand",
        ],
        "correct_option": "B",
        "explanation": (
            "Gresham's Law states that \"bad money drives out good money,\" meaning that when two currencies "
            "are in circulation, people will hoard the more valuable one and spend the less valuable one."
        ),
        "subject": "Economics",
        "topic": "Microeconomics",
    },
    {
        "question_text": "Which of the following is NOT one of the four factors of production in economics?",
        "options": ["Land", "Labor", "Technology", "Capital"],
        "correct_option": "C",
        "explanation": (
            "The four classical factors of production are Land, Labor, Capital, and Entrepreneurship. "
            "Technology is considered a factor affecting productivity rather than a distinct factor of production."
        ),
        "subject": "Economics",
        "topic": "Microeconomics",
    },
]

GENERIC_TAGS = ["UPSC", "Prelims", "Important"]

DEFAULT_APP_SETTINGS = [
    ("theme", "light"),
    ("first_run", "true"),
    ("db_version", "1.0"),
]


def tags_for_question(question: dict):
    """一道示例题的标签：学科名、主题名，再加上通用标签"""
    return [question["subject"], question["topic"], *GENERIC_TAGS]
