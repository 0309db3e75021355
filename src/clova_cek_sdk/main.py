"""Echo skill entrypoint: FastAPI app plus Lambda handlers."""

import logging

from mangum import Mangum

from .app import create_app
from .config import settings
from .services.context import Context
from .services.skill import Client
from .services.speech_builder import SpeechBuilder

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

speech = SpeechBuilder(default_lang=settings.default_lang)


async def launch_handler(ctx: Context) -> None:
    ctx.set_simple_speech(speech.create_speech_text("おはよう"))


async def intent_handler(ctx: Context) -> None:
    """Answer yes/no intents; anything else gets a puzzled reply and a reprompt."""
    intent = ctx.get_intent_name()

    logger.info(f"Intent: {intent} (session {ctx.get_session_id()})")

    if intent == "Clova.YesIntent":
        ctx.set_simple_speech(speech.create_speech_text("はいはい"))
    elif intent == "Clova.NoIntent":
        ctx.set_simple_speech(speech.create_speech_text("いえいえ"))
    else:
        ctx.set_simple_speech(speech.create_speech_text("なんなん"))
        ctx.set_simple_speech(speech.create_speech_text("はいかいいえで答えてください"), reprompt=True)


async def session_ended_handler(ctx: Context) -> None:
    pass


skill = (
    Client.configure_skill()
    .on_launch_request(launch_handler)
    .on_intent_request(intent_handler)
    .on_session_ended_request(session_ended_handler)
)

app = create_app(skill, application_id=settings.application_id or None, path=settings.skill_path)

# API Gateway / function URL in front of the app
handler = Mangum(app, lifespan="off")

# Direct invocation with the CEK payload as the event
lambda_handler = skill.lambda_()
