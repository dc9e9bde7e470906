# Question banks inserted the first time a class level has no questions.

TENTH_QUESTIONS = [
    {
        "question_text": "Which subject do you enjoy the most?",
        "options": ["Mathematics", "Science", "Languages", "Arts", "Social Studies"],
        "mapping": {
            "Mathematics": "mpc",
            "Science": "bipc",
            "Languages": "arts",
            "Arts": "arts",
            "Social Studies": "commerce",
        },
        "class_level": "10th",
    },
    {
        "question_text": "What type of activities do you prefer?",
        "options": ["Problem solving", "Experiments", "Creative writing", "Drawing/Painting", "Business activities"],
        "mapping": {
            "Problem solving": "mpc",
            "Experiments": "bipc",
            "Creative writing": "arts",
            "Drawing/Painting": "arts",
            "Business activities": "commerce",
        },
        "class_level": "10th",
    },
    {
        "question_text": "Which career field attracts you most?",
        "options": ["Engineering", "Medicine", "Teaching", "Arts & Design", "Business"],
        "mapping": {
            "Engineering": "mpc",
            "Medicine": "bipc",
            "Teaching": "arts",
            "Arts & Design": "arts",
            "Business": "commerce",
        },
        "class_level": "10th",
    },
]

TWELFTH_QUESTIONS = [
    {
        "question_text": "What is your preferred study approach?",
        "options": ["Theoretical concepts", "Practical applications", "Research work", "Creative projects", "Business cases"],
        "mapping": {
            "Theoretical concepts": "engineering",
            "Practical applications": "technology",
            "Research work": "science",
            "Creative projects": "arts",
            "Business cases": "management",
        },
        "class_level": "12th",
    },
    {
        "question_text": "Which work environment appeals to you?",
        "options": ["Lab/Technical", "Corporate office", "Healthcare", "Educational institution", "Creative studio"],
        "mapping": {
            "Lab/Technical": "engineering",
            "Corporate office": "management",
            "Healthcare": "medical",
            "Educational institution": "education",
            "Creative studio": "arts",
        },
        "class_level": "12th",
    },
]


def default_questions(class_level: str) -> list[dict]:
    if class_level == "10th":
        return [dict(q) for q in TENTH_QUESTIONS]
    # every other level gets the 12th bank, tagged with the requested level
    return [{**q, "class_level": class_level} for q in TWELFTH_QUESTIONS]
