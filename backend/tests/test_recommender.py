from services.recommender import (
    DEFAULT_CAREER_PATH,
    MAX_RECOMMENDATIONS,
    PRIORITY_ORDER,
    generate_skill_recommendations,
    get_learning_resources,
    list_skill_categories,
    recommend_skills,
    suggest_career_paths,
)


class TestGenerateRecommendations:
    def test_frontend_gap_comes_first(self):
        recs = generate_skill_recommendations(["react"])
        assert [r.skill for r in recs[:2]] == ["TypeScript", "Jest (Unit Testing)"]
        assert recs[0].priority == "high"
        assert len(recs) == MAX_RECOMMENDATIONS

    def test_duplicate_skill_keeps_higher_priority(self):
        recs = generate_skill_recommendations(["react"])
        typescript = [r for r in recs if r.skill == "TypeScript"]
        assert len(typescript) == 1
        assert typescript[0].priority == "high"

    def test_complementary_skills_exclude_held_skills(self):
        recs = generate_skill_recommendations(["react"])
        skills = [r.skill for r in recs]
        assert "React" not in skills
        assert "HTML" in skills
        html = next(r for r in recs if r.skill == "HTML")
        assert html.priority == "medium"
        assert html.reason == "Complements your existing Frontend Development skills"

    def test_no_skills(self):
        recs = generate_skill_recommendations([])
        assert [r.skill for r in recs] == ["Jest (Unit Testing)", "AWS"]

    def test_backend_runtime_without_database(self):
        recs = generate_skill_recommendations(["nodejs"])
        assert [r.skill for r in recs] == ["PostgreSQL", "Jest (Unit Testing)", "AWS"]

    def test_satisfied_rules_do_not_fire(self):
        recs = generate_skill_recommendations(["aws", "jest"])
        assert all(r.priority == "medium" for r in recs)
        assert "AWS" not in [r.skill for r in recs]
        assert "Jest (Unit Testing)" not in [r.skill for r in recs]

    def test_sorted_by_priority(self):
        recs = generate_skill_recommendations(["react", "nodejs", "python"])
        ranks = [PRIORITY_ORDER[r.priority] for r in recs]
        assert ranks == sorted(ranks)

    def test_unique_by_skill_name(self):
        recs = generate_skill_recommendations(["python", "react", "docker"])
        names = [r.skill.lower() for r in recs]
        assert len(names) == len(set(names))


def test_learning_resources_known_and_fallback():
    resources = get_learning_resources(["TypeScript", "Rust"])
    assert resources[0].resources[0] == "TypeScript Official Docs"
    assert resources[1].resources == [
        'Search for "Rust tutorial" on YouTube',
        "Check Udemy for Rust courses",
        "Visit official Rust documentation",
    ]


def test_learning_resources_node_alias():
    resources = get_learning_resources(["Node.js"])
    assert resources[0].resources[0] == "Node.js Official Docs"


class TestCareerPaths:
    def test_full_stack(self):
        paths = suggest_career_paths(["react", "nodejs"])
        assert len(paths) == 3
        assert paths[2].startswith("Full Stack Developer")

    def test_data_and_backend(self):
        paths = suggest_career_paths(["sql", "python"])
        assert [p.split(" ")[0] for p in paths] == ["Backend", "Data"]

    def test_fallback(self):
        assert suggest_career_paths([]) == [DEFAULT_CAREER_PATH]


def test_recommend_skills_end_to_end():
    result = recommend_skills("I work with React and HTML daily", "Frontend Developer")
    assert result.current_skills == ["react", "html"]
    assert result.target_role == "Frontend Developer"
    assert result.recommended_skills[0].skill == "TypeScript"
    assert 1 <= len(result.learning_resources) <= 5
    assert result.learning_resources[0].skill == "TypeScript"
    assert result.career_paths[0].startswith("Frontend Developer")


def test_list_skill_categories():
    categories = list_skill_categories()
    assert len(categories) == 9
    assert categories[0].category == "Frontend Development"
    assert categories[0].skill_count == 15
    assert categories[0].sample_skills == ["HTML", "CSS", "JavaScript", "TypeScript", "React"]
