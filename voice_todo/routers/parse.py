from datetime import UTC, datetime

from fastapi import APIRouter

from ..config import settings
from ..nlp.parser import command_examples, needs_review, parse
from ..schemas import ParseIn, ParseOut

router = APIRouter()


@router.post("", response_model=ParseOut)
async def parse_transcript(payload: ParseIn):
    now = payload.now or datetime.now(UTC)
    task = parse(payload.text, now)
    return ParseOut(
        task=task,
        auto_accept=not needs_review(task, settings.auto_accept_threshold),
        # an unusable parse is added as a simple task with the raw words
        fallback_title=task.title if task.is_valid else payload.text.strip(),
    )


@router.get("/examples", response_model=list[str])
def examples():
    return command_examples()
