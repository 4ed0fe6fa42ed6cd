import logging

from django.shortcuts import render, redirect
from django.views import View

from config.constants import ASSISTANT_HISTORY_LIMIT, MSG_ASSISTANT_GREETING
from .forms import AssistantMessageForm
from .services import CareerAssistantService

logger = logging.getLogger('apps.assistant')

SESSION_KEY = 'assistant_transcript'


def _greeting():
    return [{'role': 'bot', 'text': MSG_ASSISTANT_GREETING}]


def get_transcript(session):
    return session.get(SESSION_KEY) or _greeting()


def append_exchange(session, user_text, bot_text):
    """Add one question/answer pair, keeping only the newest messages."""
    transcript = get_transcript(session) + [
        {'role': 'user', 'text': user_text},
        {'role': 'bot', 'text': bot_text},
    ]
    session[SESSION_KEY] = transcript[-ASSISTANT_HISTORY_LIMIT:]
    return session[SESSION_KEY]


class AssistantView(View):
    template_name = 'assistant/assistant.html'
    partial_template = 'assistant/_transcript.html'

    def _render(self, request, form):
        template = self.partial_template if request.headers.get('HX-Request') else self.template_name
        return render(request, template, {
            'form': form,
            'transcript': get_transcript(request.session),
        })

    def get(self, request):
        return self._render(request, AssistantMessageForm())

    def post(self, request):
        form = AssistantMessageForm(request.POST)
        # Blank input is a no-op; the transcript is re-rendered unchanged
        if not request.POST.get('message', '').strip():
            return self._render(request, AssistantMessageForm())
        if not form.is_valid():
            return self._render(request, form)

        message = form.cleaned_data['message']
        if not request.session.session_key:
            request.session.save()
        reply = CareerAssistantService().get_career_advice(
            message, actor=request.user, session_key=request.session.session_key,
        )
        append_exchange(request.session, message, reply)
        return self._render(request, AssistantMessageForm())


class AssistantResetView(View):
    def post(self, request):
        request.session.pop(SESSION_KEY, None)
        if request.headers.get('HX-Request'):
            return render(request, AssistantView.partial_template, {
                'form': AssistantMessageForm(),
                'transcript': _greeting(),
            })
        return redirect('assistant')
