"""Idempotent seed data for the interview question catalog."""

from sqlalchemy import func, select

from app.db.base import get_session_factory
from app.db.models.chat_question import ChatQuestion

# Starting question sets; admins edit them from the console afterwards.
CATALOG_SEED: dict[str, list[str]] = {
    "Ai부업경험담": [
        "공유해주실 부업이나 프로젝트의 '제목'을 정해주세요.",
        "이 부업을 시작하게 된 계기나 배경은 무엇인가요?",
        "주로 어떤 도구(AI 툴, 플랫폼 등)를 사용하셨나요?",
        "하루 평균 투자 시간과 월 발생 비용은 어느 정도인가요?",
        "지금까지의 성과(수익이나 결과)를 솔직하게 알려주세요.",
        "이 부업을 다른 분들에게 추천하시나요? 그 이유와 함께 장단점을 알려주세요.",
        "마지막으로 이 길을 걷고자 하는 다른 모험가분들에게 한마디 부탁드립니다.",
    ],
}


async def seed_question_catalog() -> None:
    """Insert seed questions for categories that have none yet."""
    factory = get_session_factory()

    async with factory() as session:
        for category, questions in CATALOG_SEED.items():
            result = await session.execute(
                select(func.count(ChatQuestion.id)).where(ChatQuestion.category == category)
            )
            if (result.scalar() or 0) > 0:
                continue

            for index, text in enumerate(questions):
                session.add(ChatQuestion(category=category, question_text=text, order_index=index))

        await session.commit()
