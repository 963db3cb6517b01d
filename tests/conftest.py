import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import zonescore_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from zonescore_toolkit.core.models import Question, Zone, ZoneMembership, ZoneScore
from zonescore_toolkit.reporting.loading import InMemoryRecordSource


def make_snapshot(snapshot_id: int, zones: dict[str, list], *, first_question_id: int = 1):
    """
    Build records for one snapshot from {zone_name: [score, ...]}.

    Zone ids follow dict order starting at 1; each score becomes one
    relevant question linked to its zone only. None means unanswered.
    """
    zone_records = []
    questions = []
    memberships = []
    qid = first_question_id
    for zone_id, (name, scores) in enumerate(zones.items(), start=1):
        zone_records.append(Zone(snapshot_id, zone_id, name))
        for score in scores:
            questions.append(Question(snapshot_id, qid, f"Question {qid}", score=score))
            memberships.append(ZoneMembership(snapshot_id, zone_id, qid))
            qid += 1
    return zone_records, memberships, questions


def scored(zone_id: int, name: str, score, answered: int = 1, total: int | None = None) -> ZoneScore:
    """Shorthand ZoneScore; answered is forced to 0 for unscored zones."""
    if score is None:
        answered = 0
    return ZoneScore(
        zone_id=zone_id,
        zone_name=name,
        score=score,
        total_questions=answered if total is None else total,
        answered_questions=answered,
    )


# Common test fixtures
@pytest.fixture
def snapshot_factory():
    """Factory building (zones, memberships, questions) for one snapshot."""
    return make_snapshot


@pytest.fixture
def zone_score_factory():
    """Factory building a ZoneScore from (zone_id, name, score, answered)."""
    return scored


@pytest.fixture
def scenario_a():
    """Snapshot 1: Math [80, 60, 90], Science [None, None]."""
    return make_snapshot(1, {"Math": [80, 60, 90], "Science": [None, None]})


@pytest.fixture
def scenario_a_source(scenario_a) -> InMemoryRecordSource:
    zones, memberships, questions = scenario_a
    return InMemoryRecordSource(questions=questions, zones=zones, memberships=memberships)


@pytest.fixture
def six_zone_scores() -> list[ZoneScore]:
    """Zones A-F, all answered, ascending by name."""
    values = {"A": 50, "B": 70, "C": 55, "D": 90, "E": 65, "F": 40}
    return [scored(i, name, float(v)) for i, (name, v) in enumerate(values.items(), start=1)]
