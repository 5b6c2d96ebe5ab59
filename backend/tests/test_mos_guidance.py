"""Tests for the insight, resource and step generators."""

import pytest

from models.schemas.occupation import OccupationCategory
from models.schemas.task import TaskDescriptor
from services.mos_guidance import (
    BASELINE_RESOURCE,
    CATEGORY_INSIGHTS,
    GENERAL_INSIGHT_EXTRAS,
    GENERAL_INSIGHTS,
    GENERIC_STEPS,
    STEP_RULES,
    build_guide,
    get_insights,
    get_resources,
    get_steps,
)


def _task(title: str, category: str = "admin") -> TaskDescriptor:
    return TaskDescriptor(id="t1", title=title, description="", category=category)


def _rule(name: str):
    return next(r for r in STEP_RULES if r.name == name)


class TestSteps:
    def test_dd214_task_gets_exactly_dd214_steps(self):
        task = _task("Request certified copy of DD-214 upon separation")
        assert get_steps(task, "25B") == list(_rule("dd214").steps)

    def test_no_trigger_gets_generic_steps(self):
        steps = get_steps(_task("Call grandma"), "25B")
        assert steps == list(GENERIC_STEPS)
        assert len(steps) == 5

    def test_resume_steps_mention_the_code(self):
        steps = get_steps(_task("Update resume"), "68W")
        assert "68W" in steps[0]
        assert "{code}" not in " ".join(steps)

    def test_category_bonus_steps_added(self):
        steps = get_steps(_task("Update resume"), "25B")
        assert any("DoD 8140" in s for s in steps)

        unclassified = get_steps(_task("Update resume"), "zzz")
        assert not any("DoD 8140" in s for s in unclassified)

    def test_all_groups_must_match(self):
        # "disability" alone is not enough for the claim steps
        steps = get_steps(_task("Read about disability"), "zzz")
        assert steps == list(GENERIC_STEPS)

        claim = get_steps(_task("File disability claim"), "zzz")
        assert claim == list(_rule("disability_claim").steps)

    def test_every_matching_trigger_contributes(self):
        steps = get_steps(_task("Apply for job, then update LinkedIn"), "zzz")
        job = list(_rule("job_application").steps)
        linkedin = list(_rule("linkedin").steps)
        assert steps == linkedin + job

    def test_shared_bonus_step_not_duplicated(self):
        steps = get_steps(_task("Update resume and apply for a job"), "25B")
        assert len(steps) == len(set(steps))


class TestInsights:
    def test_category_insights_first(self):
        insights = get_insights("25B", _task("Misc", category="wellness"))
        assert insights == list(CATEGORY_INSIGHTS[OccupationCategory.CYBER])

    def test_task_rule_adds_category_extras(self):
        insights = get_insights("11B", _task("Write resume", category="career"))
        infantry = CATEGORY_INSIGHTS[OccupationCategory.INFANTRY]
        assert insights[: len(infantry)] == list(infantry)
        assert len(insights) > len(infantry)

    def test_fallback_for_unclassified_code(self):
        insights = get_insights("zzz", _task("Misc", category="admin"))
        assert insights == list(GENERAL_INSIGHTS) + list(GENERAL_INSIGHT_EXTRAS["admin"])

    def test_fallback_varies_with_task_category(self):
        wellness = get_insights("zzz", _task("Misc", category="wellness"))
        admin = get_insights("zzz", _task("Misc", category="admin"))
        assert wellness != admin
        assert wellness[: len(GENERAL_INSIGHTS)] == list(GENERAL_INSIGHTS)

    def test_fallback_skipped_when_task_rule_fires(self):
        insights = get_insights("zzz", _task("Plan budget", category="finance"))
        assert not set(GENERAL_INSIGHTS) & set(insights)


class TestResources:
    def test_baseline_always_first(self):
        resources = get_resources(_task("Misc", category="wellness"))
        assert resources == [BASELINE_RESOURCE]

    def test_matching_rules_append(self):
        resources = get_resources(_task("Find a job", category="admin"))
        names = [r.name for r in resources]
        assert names[0] == "VA.gov"
        assert "USAJobs.gov" in names

    def test_category_and_title_match_once(self):
        resources = get_resources(_task("Update resume", category="career"))
        keys = [(r.name, r.url) for r in resources]
        assert len(keys) == len(set(keys))


@pytest.mark.parametrize("code, title, category", [
    ("25B", "Apply for job and update resume", "career"),
    ("68W", "File disability claim with documentation", "healthcare"),
    ("11B", "Enroll in VA healthcare", "healthcare"),
    ("zzz", "Call grandma", "wellness"),
    ("", "Use GI Bill for school", "education"),
])
def test_outputs_have_no_duplicates(code, title, category):
    task = _task(title, category)
    insights = get_insights(code, task)
    steps = get_steps(task, code)
    resources = get_resources(task)

    assert len(insights) == len(set(insights))
    assert len(steps) == len(set(steps))
    assert len({(r.name, r.url) for r in resources}) == len(resources)


def test_build_guide_bundles_generators():
    task = _task("Request DD-214", category="admin")
    guide = build_guide(task, "92A")
    assert guide.category == OccupationCategory.LOGISTICS
    assert guide.steps == list(_rule("dd214").steps)
    assert guide.resources[0] == BASELINE_RESOURCE
    assert guide.insights == get_insights("92A", task)
