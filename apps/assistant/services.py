import time
import logging

import openai
from django.conf import settings
from django.db.models import Sum
from django.utils import timezone

from config.constants import (
    ASSISTANT_DEFAULT_MODEL, MSG_ASSISTANT_UNAVAILABLE, MSG_ASSISTANT_CONNECTION_ERROR,
)
from core.llm_services import calculate_cost
from core.models import LLMConfig, LLMUsageLog
from core.security import decrypt_value

logger = logging.getLogger('apps.assistant')

DEFAULT_SYSTEM_PROMPT = (
    "You are a professional career counselor at Fortex Education (Kerala). "
    "Your goal is to help students choose between our core programs: B.Sc. Nursing, GNM, "
    "Medical Laboratory Technology (MLT), BCA, and Engineering. "
    "Provide encouraging, concise, and expert advice based on the student's interests or background. "
    "Always mention that Fortex offers admissions support in Wayanad and Malappuram. "
    "Keep the tone professional and helpful."
)


def monthly_tokens_used():
    month_start = timezone.now().replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    return LLMUsageLog.objects.filter(created_at__gte=month_start).aggregate(
        total=Sum('total_tokens')
    )['total'] or 0


class CareerAssistantService:
    """
    One-shot career advice from the hosted chat model.

    Never raises on API trouble: callers always get text back, either the
    model's reply or a fallback pointing the visitor to the phone line.
    """

    def __init__(self):
        config = LLMConfig.load()
        self.config = config
        self.api_key = decrypt_value(config.encrypted_api_key) or settings.OPENAI_API_KEY
        if self.api_key and config.generation_enabled:
            self.client = openai.OpenAI(api_key=self.api_key)
        else:
            self.client = None

    @property
    def system_prompt(self):
        return self.config.system_prompt.strip() or DEFAULT_SYSTEM_PROMPT

    @property
    def model_name(self):
        return self.config.active_model or ASSISTANT_DEFAULT_MODEL

    def _cap_reached(self):
        if not self.config.monthly_token_cap:
            return False
        if monthly_tokens_used() < self.config.monthly_token_cap:
            return False
        if self.config.auto_disable_on_cap:
            self.config.generation_enabled = False
            self.config.save()
            logger.warning("Monthly token cap reached; assistant generation disabled")
        return True

    def get_career_advice(self, message, actor=None, session_key=''):
        if not self.client:
            logger.info("Assistant unavailable: no API key or generation disabled")
            return MSG_ASSISTANT_UNAVAILABLE

        if self._cap_reached():
            return MSG_ASSISTANT_UNAVAILABLE

        log_fields = {
            'model_name': self.model_name,
            'user_message': message,
            'session_key': session_key or '',
            'actor': actor if actor is not None and actor.is_authenticated else None,
        }

        try:
            start = time.time()
            response = self.client.chat.completions.create(
                model=self.model_name,
                messages=[
                    {"role": "system", "content": self.system_prompt},
                    {"role": "user", "content": message},
                ],
                temperature=float(self.config.temperature),
                max_tokens=self.config.max_output_tokens,
            )
            latency_ms = int((time.time() - start) * 1000)
        except Exception as e:
            logger.exception("Career assistant request failed")
            LLMUsageLog.objects.create(success=False, error_message=str(e), **log_fields)
            return MSG_ASSISTANT_CONNECTION_ERROR

        content = response.choices[0].message.content if response.choices else None
        usage = response.usage
        prompt_tokens = usage.prompt_tokens if usage else 0
        completion_tokens = usage.completion_tokens if usage else 0
        costs = calculate_cost(self.model_name, prompt_tokens, completion_tokens)
        LLMUsageLog.objects.create(
            response_text=content or "",
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=usage.total_tokens if usage else 0,
            cost_input=costs['input'],
            cost_output=costs['output'],
            cost_total=costs['total'],
            latency_ms=latency_ms,
            success=bool(content),
            error_message='' if content else 'Empty reply',
            **log_fields,
        )
        if not content:
            logger.warning("Career assistant returned an empty reply")
            return MSG_ASSISTANT_UNAVAILABLE
        return content
