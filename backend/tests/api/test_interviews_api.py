"""API tests for question sets, guided interviews and scam reports."""

import pytest

from app.db.models.chat_question import ChatQuestion
from app.domain.categories import SCAM_REPORT_CATEGORY
from app.domain.questions import DEFAULT_QUESTIONS, SCAM_REPORT_QUESTIONS

pytestmark = pytest.mark.integration


@pytest.fixture
async def seeded_catalog(session_factory):
    async with session_factory() as session:
        session.add(ChatQuestion(category="Ai부업경험담", question_text="What result?", order_index=1))
        session.add(ChatQuestion(category="Ai부업경험담", question_text="What tool?", order_index=0))
        await session.commit()


def test_questions_in_order(api_client, seeded_catalog):
    response = api_client.get("/api/questions/Ai부업경험담")

    assert response.status_code == 200
    assert response.json() == {"category": "Ai부업경험담", "questions": ["What tool?", "What result?"]}


def test_questions_default_for_empty_category(api_client):
    response = api_client.get("/api/questions/자유게시판")
    assert response.json()["questions"] == list(DEFAULT_QUESTIONS)


def test_start_interview(api_client, acting_as, silver_member, seeded_catalog):
    acting_as.identity = silver_member

    response = api_client.post("/api/interviews/start", json={"category": "Ai부업경험담"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "awaiting_answer"
    assert body["prompt"] == "What tool?"
    assert body["questions"] == ["What tool?", "What result?"]


def test_start_restricted_category_as_silver(api_client, acting_as, silver_member):
    acting_as.identity = silver_member

    response = api_client.post("/api/interviews/start", json={"category": "고수의노하우"})

    assert response.status_code == 403
    assert response.json()["error"] == "PermissionDenied"
    assert "debug_id" in response.json()


def test_start_unknown_flow(api_client, acting_as, silver_member):
    acting_as.identity = silver_member

    response = api_client.post("/api/interviews/start", json={"category": "자유게시판", "flow": "poll"})

    assert response.status_code == 422


def test_start_requires_auth(api_client):
    response = api_client.post("/api/interviews/start", json={"category": "자유게시판"})
    assert response.status_code == 401


def test_complete_interview_stores_report(api_client, acting_as, silver_member):
    acting_as.identity = silver_member

    response = api_client.post(
        "/api/interviews/complete",
        json={
            "category": "Ai부업경험담",
            "questions": ["What tool?", "What result?"],
            "answers": ["GPT", "Profitable"],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "complete"
    assert body["record_id"]

    post = api_client.get(f"/api/posts/{body['record_id']}").json()
    assert post["title"] == "GPT"
    assert post["author"] == "실버회원"
    assert post["user_id"] == str(silver_member.user_id)
    assert post["result"] == "기록 완료"
    assert post["content"].index("> GPT") < post["content"].index("> Profitable")


def test_complete_interview_with_long_third_answer(api_client, acting_as, silver_member):
    acting_as.identity = silver_member
    long_tool = "n8n" + "x" * 297

    response = api_client.post(
        "/api/interviews/complete",
        json={
            "category": "Ai부업경험담",
            "questions": ["제목은?", "결과는?", "사용한 도구는?", "하루 작업 시간은?"],
            "answers": ["자동화 후기", "월 30만원", long_tool, "2시간"],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "complete"
    post = api_client.get(f"/api/posts/{body['record_id']}").json()
    assert post["tool"] == long_tool
    assert post["daily_time"] == "2시간"


def test_complete_with_missing_answers(api_client, acting_as, silver_member):
    acting_as.identity = silver_member

    response = api_client.post(
        "/api/interviews/complete",
        json={"category": "Ai부업경험담", "questions": ["q1", "q2", "q3"], "answers": ["only one"]},
    )

    assert response.status_code == 422
    assert response.json()["error"] == "InvalidInterview"
    assert api_client.get("/api/posts").json() == []


def test_scam_report(api_client, acting_as, silver_member):
    acting_as.identity = silver_member
    answers = ["유튜브 쇼츠 자동화", "330만원"] + [f"답변 {i}" for i in range(2, len(SCAM_REPORT_QUESTIONS))]

    response = api_client.post("/api/scam-reports", json={"answers": answers})

    assert response.status_code == 200
    post = api_client.get(f"/api/posts/{response.json()['record_id']}").json()
    assert post["category"] == SCAM_REPORT_CATEGORY
    assert post["title"] == "[피해사례] 유튜브 쇼츠 자동화 관련 제보 리포트"
    assert post["result"] == "검증 완료: 사기 주의보"
    assert post["cost"] == "330만원"
    assert post["likes"] == 0


def test_scam_report_incomplete(api_client, acting_as, silver_member):
    acting_as.identity = silver_member

    response = api_client.post("/api/scam-reports", json={"answers": ["하나", "둘"]})

    assert response.status_code == 422


def _scam_answers():
    return ["코인 리딩방", "50만원"] + [f"답변 {i}" for i in range(2, len(SCAM_REPORT_QUESTIONS))]


def test_scam_report_with_author_alias(api_client, acting_as, silver_member):
    acting_as.identity = silver_member

    response = api_client.post("/api/scam-reports", json={"answers": _scam_answers(), "author_alias": "  피해자K  "})

    assert response.status_code == 200
    post = api_client.get(f"/api/posts/{response.json()['record_id']}").json()
    assert post["author"] == "피해자K"
    assert post["user_id"] == str(silver_member.user_id)


def test_scam_report_author_defaults_to_nickname(api_client, acting_as, silver_member):
    acting_as.identity = silver_member

    response = api_client.post("/api/scam-reports", json={"answers": _scam_answers()})

    post = api_client.get(f"/api/posts/{response.json()['record_id']}").json()
    assert post["author"] == "실버회원"


@pytest.fixture
async def member_without_nickname(make_profile):
    return await make_profile(email="nonick@example.com", nickname=None)


def test_scam_report_without_nickname_is_anonymous(api_client, acting_as, member_without_nickname):
    acting_as.identity = member_without_nickname

    response = api_client.post("/api/scam-reports", json={"answers": _scam_answers(), "author_alias": "   "})

    post = api_client.get(f"/api/posts/{response.json()['record_id']}").json()
    assert post["author"] == "익명의모험가"
