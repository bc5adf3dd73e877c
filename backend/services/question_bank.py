"""Fixed bank of interview questions tagged by skill, category and difficulty."""

from models.schemas.interview_prep import InterviewQuestion
from services.similarity import is_containment_match

DIFFICULTIES: tuple[str, ...] = ("easy", "medium", "hard")

INTERVIEW_QUESTIONS: tuple[InterviewQuestion, ...] = (
    # JavaScript / TypeScript
    InterviewQuestion(
        question="Explain the difference between var, let, and const in JavaScript.",
        category="JavaScript",
        difficulty="easy",
        skills=["JavaScript", "TypeScript"],
    ),
    InterviewQuestion(
        question="What is closure in JavaScript? Provide an example.",
        category="JavaScript",
        difficulty="medium",
        skills=["JavaScript"],
    ),
    InterviewQuestion(
        question="Explain the event loop in Node.js and how it handles asynchronous operations.",
        category="JavaScript",
        difficulty="hard",
        skills=["Node.js", "JavaScript"],
    ),
    # React
    InterviewQuestion(
        question="What are React Hooks and why were they introduced?",
        category="Frontend",
        difficulty="medium",
        skills=["React"],
    ),
    InterviewQuestion(
        question="Explain the difference between useEffect and useLayoutEffect.",
        category="Frontend",
        difficulty="hard",
        skills=["React"],
    ),
    InterviewQuestion(
        question="How would you optimize the performance of a React application?",
        category="Frontend",
        difficulty="hard",
        skills=["React", "Performance"],
    ),
    # Backend
    InterviewQuestion(
        question="What is the difference between SQL and NoSQL databases? When would you use each?",
        category="Backend",
        difficulty="medium",
        skills=["Databases", "MongoDB", "SQL"],
    ),
    InterviewQuestion(
        question="Explain RESTful API design principles and best practices.",
        category="Backend",
        difficulty="medium",
        skills=["REST API", "Backend"],
    ),
    InterviewQuestion(
        question="How would you implement authentication and authorization in a NestJS application?",
        category="Backend",
        difficulty="hard",
        skills=["NestJS", "Security", "Authentication"],
    ),
    # System design
    InterviewQuestion(
        question="Design a URL shortening service like bit.ly.",
        category="System Design",
        difficulty="hard",
        skills=["System Design", "Databases", "Backend"],
    ),
    InterviewQuestion(
        question="How would you handle rate limiting in a REST API?",
        category="System Design",
        difficulty="medium",
        skills=["API Design", "Backend"],
    ),
    # DevOps
    InterviewQuestion(
        question="Explain the benefits of containerization with Docker.",
        category="DevOps",
        difficulty="easy",
        skills=["Docker", "DevOps"],
    ),
    InterviewQuestion(
        question="What is CI/CD and how would you implement it?",
        category="DevOps",
        difficulty="medium",
        skills=["CI/CD", "DevOps"],
    ),
    # Data structures & algorithms
    InterviewQuestion(
        question="Implement a function to reverse a linked list.",
        category="Algorithms",
        difficulty="medium",
        skills=["Data Structures", "Algorithms"],
    ),
    InterviewQuestion(
        question="Find the first non-repeating character in a string.",
        category="Algorithms",
        difficulty="easy",
        skills=["Algorithms", "Problem Solving"],
    ),
    # Behavioral
    InterviewQuestion(
        question="Tell me about a time when you had to debug a difficult production issue.",
        category="Behavioral",
        difficulty="medium",
        skills=["Problem Solving", "Communication"],
    ),
    InterviewQuestion(
        question="Describe a situation where you had to work with a difficult team member.",
        category="Behavioral",
        difficulty="medium",
        skills=["Communication", "Team Collaboration"],
    ),
    InterviewQuestion(
        question="How do you prioritize tasks when working on multiple projects?",
        category="Behavioral",
        difficulty="easy",
        skills=["Time Management", "Project Management"],
    ),
    # General
    InterviewQuestion(
        question="What is your approach to writing clean, maintainable code?",
        category="General",
        difficulty="medium",
        skills=["Best Practices", "Code Quality"],
    ),
    InterviewQuestion(
        question="How do you stay updated with new technologies and trends?",
        category="General",
        difficulty="easy",
        skills=["Learning", "Adaptability"],
    ),
)


def get_questions_by_skills(skills: list[str]) -> list[InterviewQuestion]:
    """Questions with at least one tag matching a skill by bidirectional containment."""
    return [
        q for q in INTERVIEW_QUESTIONS
        if any(is_containment_match(tag, s) for tag in q.skills for s in skills)
    ]


def get_questions_by_difficulty(difficulty: str) -> list[InterviewQuestion]:
    return [q for q in INTERVIEW_QUESTIONS if q.difficulty == difficulty]


def get_questions_by_category(category: str) -> list[InterviewQuestion]:
    return [q for q in INTERVIEW_QUESTIONS if q.category.lower() == category.lower()]
