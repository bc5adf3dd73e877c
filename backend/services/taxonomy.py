"""Skill taxonomy: categories, member skills and related job roles.

The table is ordered. Category lookup is first-match, so a skill listed under
more than one category (e.g. Python) is categorised by its first entry.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SkillCategory:
    """A named group of skills and the roles that typically need them."""

    name: str
    skills: tuple[str, ...]
    related_roles: tuple[str, ...]


SKILL_CATEGORIES: tuple[SkillCategory, ...] = (
    SkillCategory(
        name="Frontend Development",
        skills=(
            "HTML", "CSS", "JavaScript", "TypeScript", "React", "Angular",
            "Vue.js", "Redux", "Webpack", "Sass", "Tailwind CSS", "Bootstrap",
            "Next.js", "Responsive Design", "Web Accessibility",
        ),
        related_roles=("Frontend Developer", "UI Developer", "Web Developer"),
    ),
    SkillCategory(
        name="Backend Development",
        skills=(
            "Node.js", "NestJS", "Express.js", "Python", "Django", "Flask",
            "Java", "Spring Boot", "PHP", "Laravel", "Ruby on Rails",
            "RESTful APIs", "GraphQL", "Microservices", "Authentication",
        ),
        related_roles=("Backend Developer", "API Developer", "Software Engineer"),
    ),
    SkillCategory(
        name="Databases",
        skills=(
            "MongoDB", "PostgreSQL", "MySQL", "Redis", "SQLite",
            "Oracle", "SQL Server", "Database Design", "Query Optimization",
            "NoSQL", "Cassandra", "DynamoDB",
        ),
        related_roles=("Database Administrator", "Backend Developer", "Data Engineer"),
    ),
    SkillCategory(
        name="DevOps & Cloud",
        skills=(
            "Docker", "Kubernetes", "AWS", "Azure", "Google Cloud Platform",
            "CI/CD", "Jenkins", "GitHub Actions", "Terraform", "Ansible",
            "Linux", "Shell Scripting", "Nginx", "Monitoring",
        ),
        related_roles=("DevOps Engineer", "Cloud Engineer", "Site Reliability Engineer"),
    ),
    SkillCategory(
        name="Mobile Development",
        skills=(
            "React Native", "Flutter", "Swift", "Kotlin", "Android",
            "iOS", "Xamarin", "Mobile UI/UX", "App Store Deployment",
            "Push Notifications", "Offline Storage",
        ),
        related_roles=("Mobile Developer", "iOS Developer", "Android Developer"),
    ),
    SkillCategory(
        name="Data Science & AI",
        skills=(
            "Python", "R", "Machine Learning", "TensorFlow", "PyTorch",
            "Scikit-learn", "Pandas", "NumPy", "Data Visualization",
            "SQL", "Statistics", "Deep Learning", "NLP", "Computer Vision",
        ),
        related_roles=("Data Scientist", "ML Engineer", "AI Researcher"),
    ),
    SkillCategory(
        name="Testing & QA",
        skills=(
            "Jest", "Mocha", "Cypress", "Selenium", "Pytest",
            "Unit Testing", "Integration Testing", "Test Automation",
            "Performance Testing", "Security Testing", "Bug Tracking",
        ),
        related_roles=("QA Engineer", "Test Automation Engineer", "SDET"),
    ),
    SkillCategory(
        name="Soft Skills",
        skills=(
            "Communication", "Leadership", "Team Collaboration", "Problem Solving",
            "Critical Thinking", "Time Management", "Adaptability",
            "Project Management", "Agile/Scrum", "Mentoring",
        ),
        related_roles=("All Roles",),
    ),
    SkillCategory(
        name="Tools & Version Control",
        skills=(
            "Git", "GitHub", "GitLab", "Bitbucket", "JIRA", "Confluence",
            "Slack", "VS Code", "IntelliJ IDEA", "Postman", "Figma",
        ),
        related_roles=("All Technical Roles",),
    ),
)


def get_all_skills() -> list[str]:
    """All taxonomy skills in table order (duplicates across categories kept)."""
    return [skill for category in SKILL_CATEGORIES for skill in category.skills]


def get_skills_by_category(name: str) -> list[str]:
    for category in SKILL_CATEGORIES:
        if category.name.lower() == name.lower():
            return list(category.skills)
    return []


def find_skill_category(skill: str) -> str | None:
    """Return the first category containing ``skill`` (case-insensitive)."""
    needle = skill.lower()
    for category in SKILL_CATEGORIES:
        if any(s.lower() == needle for s in category.skills):
            return category.name
    return None


def categorize_skills(skills: list[str]) -> dict[str, list[str]]:
    """Group skills by their first-match category, in taxonomy order.

    Skills outside the taxonomy are left out.
    """
    grouped: dict[str, list[str]] = {}
    for skill in skills:
        category = find_skill_category(skill)
        if category is not None:
            grouped.setdefault(category, []).append(skill)
    return {
        c.name: grouped[c.name] for c in SKILL_CATEGORIES if c.name in grouped
    }
