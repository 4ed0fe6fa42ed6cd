"""
==========================================================
LOGGING CONFIGURATION
==========================================================
Structured logging for the public site, the dashboards and the assistant.

Logs to:
  logs/app.log          — All app-level logs (views, services, commands)
  logs/errors.log       — ERROR and CRITICAL only
  logs/requests.log     — Every HTTP request (middleware)
  logs/security.log     — Auth events, permission denials
  logs/debug.log        — DEBUG-level everything (dev only)
"""

from pathlib import Path

LOG_DIR = Path(__file__).resolve().parent.parent / 'logs'
LOG_DIR.mkdir(exist_ok=True)

APP_LOGGERS = ('apps.core', 'apps.catalog', 'apps.leads', 'apps.assistant')


def _rotating(filename, level, backups, formatter='verbose', max_mb=5, filters=None):
    handler = {
        'level': level,
        'class': 'logging.handlers.RotatingFileHandler',
        'filename': str(LOG_DIR / filename),
        'maxBytes': max_mb * 1024 * 1024,
        'backupCount': backups,
        'formatter': formatter,
        'encoding': 'utf-8',
    }
    if filters:
        handler['filters'] = filters
    return handler


def get_logging_config(debug=True):
    """Return the full LOGGING dict for Django settings."""
    app_level = 'DEBUG' if debug else 'INFO'

    loggers = {
        'django': {
            'handlers': ['console', 'app_file', 'error_file'],
            'level': 'INFO',
            'propagate': False,
        },
        'django.request': {
            'handlers': ['request_file', 'error_file', 'console'],
            'level': 'INFO',
            'propagate': False,
        },
        'django.security': {
            'handlers': ['security_file', 'error_file', 'console'],
            'level': 'INFO',
            'propagate': False,
        },
        'django.db.backends': {
            'handlers': ['debug_file'],
            'level': 'DEBUG' if debug else 'WARNING',
            'propagate': False,
        },
        'apps': {
            'handlers': ['console', 'app_file', 'error_file'],
            'level': app_level,
            'propagate': False,
        },
        # Logins, sign-ups and role checks also go to the security log
        'apps.users': {
            'handlers': ['console', 'app_file', 'security_file', 'error_file'],
            'level': app_level,
            'propagate': False,
        },
        'middleware': {
            'handlers': ['console', 'request_file', 'error_file'],
            'level': app_level,
            'propagate': False,
        },
        'diagnostics': {
            'handlers': ['console', 'app_file'],
            'level': 'DEBUG',
            'propagate': False,
        },
    }
    for name in APP_LOGGERS:
        loggers[name] = {
            'handlers': ['console', 'app_file', 'error_file'],
            'level': app_level,
            'propagate': False,
        }

    return {
        'version': 1,
        'disable_existing_loggers': False,

        'formatters': {
            'verbose': {
                'format': '{asctime} [{levelname}] {name} | {module}.{funcName}:{lineno} | {message}',
                'style': '{',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
            'simple': {
                'format': '{asctime} [{levelname}] {message}',
                'style': '{',
                'datefmt': '%H:%M:%S',
            },
        },

        'filters': {
            'require_debug_true': {
                '()': 'django.utils.log.RequireDebugTrue',
            },
        },

        'handlers': {
            'console': {
                'level': 'DEBUG' if debug else 'INFO',
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
            },
            'app_file': _rotating('app.log', 'INFO', backups=5),
            'error_file': _rotating('errors.log', 'ERROR', backups=10),
            'request_file': _rotating('requests.log', 'INFO', backups=3),
            'security_file': _rotating('security.log', 'INFO', backups=5),
            'debug_file': _rotating(
                'debug.log', 'DEBUG', backups=2, max_mb=10, filters=['require_debug_true'],
            ),
        },

        'loggers': loggers,
    }
