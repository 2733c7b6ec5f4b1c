from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Hello"])

GREETING = "Hello from go!\n"


@router.get("/hello", response_class=PlainTextResponse)
def hello():
    return GREETING
