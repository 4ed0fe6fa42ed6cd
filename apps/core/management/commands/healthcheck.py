"""
==========================================================
SITE HEALTH CHECK COMMAND
==========================================================
Run: python manage.py healthcheck

Checks:
  ✅ Database connection and pending migrations
  ✅ Site settings singleton, WhatsApp number and hidden sections
  ✅ Course categories (seeded, each with programs)
  ✅ Booking: open and offering at least one interest
  ✅ Inboxes: unread consultations older than a week
  ✅ Career assistant key, switch and monthly token cap
  ✅ Public pages load
  ✅ Log directory
"""

import logging
from datetime import timedelta
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import connections, DEFAULT_DB_ALIAS, OperationalError
from django.db.migrations.executor import MigrationExecutor
from django.utils import timezone

from assistant.services import monthly_tokens_used
from catalog.models import Service
from core.models import SiteSettings, LLMConfig
from core.monitor import SystemMonitor
from core.security import decrypt_value
from core.visibility import visibility_map
from leads.models import Consultation
from leads.services import InboxService

logger = logging.getLogger('diagnostics')

STALE_UNREAD_DAYS = 7


class Command(BaseCommand):
    help = 'Check the site: settings, catalog, booking, inboxes, assistant and pages.'

    CHECKS = [
        'check_database',
        'check_site_settings',
        'check_course_categories',
        'check_booking',
        'check_inboxes',
        'check_assistant',
        'check_pages',
        'check_log_dir',
    ]

    def handle(self, *args, **options):
        self.stdout.write(self.style.HTTP_INFO('\n' + '=' * 60))
        self.stdout.write(self.style.HTTP_INFO('  🏥  SITE HEALTH CHECK'))
        self.stdout.write(self.style.HTTP_INFO('=' * 60 + '\n'))

        results = {'pass': 0, 'warn': 0, 'fail': 0}
        for check_name in self.CHECKS:
            try:
                result = getattr(self, check_name)()
            except Exception as e:
                logger.exception("Health check %s crashed", check_name)
                self.report('fail', check_name.replace('check_', '').replace('_', ' ').title(), str(e))
                result = 'fail'
            results[result] += 1

        self.stdout.write('\n' + '=' * 60)
        self.stdout.write(
            f"  RESULTS: ✅ {results['pass']} passed | ⚠️  {results['warn']} warnings | ❌ {results['fail']} failed"
        )
        self.stdout.write('=' * 60 + '\n')

        if results['fail']:
            self.stdout.write(self.style.ERROR('⛔ Some checks FAILED. Review the output above.'))
            logger.error("Health check: %s failed, %s warnings", results['fail'], results['warn'])
        elif results['warn']:
            self.stdout.write(self.style.WARNING('⚠️  All checks passed with warnings.'))
            logger.warning("Health check: %s warnings", results['warn'])
        else:
            self.stdout.write(self.style.SUCCESS('🎉 All checks PASSED! Site is healthy.'))
            logger.info("Health check: all checks passed")

    STYLES = {
        'pass': ('✅', 'SUCCESS'),
        'warn': ('⚠️ ', 'WARNING'),
        'fail': ('❌', 'ERROR'),
    }

    def report(self, result, name, detail=''):
        icon, style = self.STYLES[result]
        msg = f'  {icon} {name}'
        if detail:
            msg += f' — {detail}'
        self.stdout.write(getattr(self.style, style)(msg))
        return result

    # -------------------------------------------------------
    # Individual Checks
    # -------------------------------------------------------

    def check_database(self):
        connection = connections[DEFAULT_DB_ALIAS]
        try:
            connection.ensure_connection()
        except OperationalError as e:
            return self.report('fail', 'Database', f'Cannot connect: {e}')

        executor = MigrationExecutor(connection)
        pending = executor.migration_plan(executor.loader.graph.leaf_nodes())
        if pending:
            names = ', '.join(f'{m.app_label}.{m.name}' for m, _ in pending[:5])
            return self.report('warn', 'Database', f'{len(pending)} unapplied migration(s): {names}')
        return self.report('pass', 'Database', f'Connected ({connection.vendor}), migrations applied')

    def check_site_settings(self):
        """The singleton row exists, is alone, and its contact links work."""
        rows = SiteSettings.objects.count()
        if rows > 1:
            return self.report('fail', 'Site Settings', f'{rows} rows found; expected exactly one')
        site = SiteSettings.load()
        if site.whatsapp_number and not site.whatsapp_number.isdigit():
            return self.report('fail', 'Site Settings', f'WhatsApp number "{site.whatsapp_number}" is not digits')

        hidden = [sid for sid, visible in visibility_map(site).items() if not visible]
        if hidden:
            return self.report('warn', 'Site Settings', f'Hidden sections: {", ".join(hidden)}')
        return self.report('pass', 'Site Settings', 'All sections visible')

    def check_course_categories(self):
        count = Service.objects.count()
        if not count:
            return self.report('warn', 'Course Categories', 'None found; run "manage.py seed_data"')
        empty = [s.title for s in Service.objects.all() if not s.programs]
        if empty:
            return self.report('warn', 'Course Categories', f'No programs listed for: {", ".join(empty)}')
        return self.report('pass', 'Course Categories', f'{count} categories with programs')

    def check_booking(self):
        """Visitors can only book when the section is on and interests exist."""
        if not visibility_map(SiteSettings.load())['booking']:
            return self.report('warn', 'Booking', 'Booking section is hidden; consultations are refused')
        if not Service.objects.exists():
            return self.report('warn', 'Booking', 'No course categories to pick as interest')
        return self.report('pass', 'Booking', 'Open')

    def check_inboxes(self):
        unread = InboxService.unread_counts()
        cutoff = timezone.now() - timedelta(days=STALE_UNREAD_DAYS)
        stale = Consultation.objects.filter(read=False, created_at__lt=cutoff).count()
        summary = ', '.join(f'{kind}: {n}' for kind, n in unread.items())
        if stale:
            return self.report(
                'warn', 'Inboxes', f'{stale} consultation(s) unread for over {STALE_UNREAD_DAYS} days ({summary})'
            )
        return self.report('pass', 'Inboxes', f'Unread {summary}')

    def check_assistant(self):
        config = LLMConfig.load()
        if config.encrypted_api_key and not decrypt_value(config.encrypted_api_key):
            return self.report(
                'fail', 'Career Assistant', 'Stored API key cannot be decrypted; was LLM_ENCRYPTION_KEY changed?'
            )
        if not config.generation_enabled:
            return self.report('warn', 'Career Assistant', 'Generation is disabled')
        if not (config.encrypted_api_key or settings.OPENAI_API_KEY):
            return self.report('warn', 'Career Assistant', 'No API key configured; visitors get the fallback reply')
        if config.monthly_token_cap:
            used = monthly_tokens_used()
            if used >= config.monthly_token_cap * 0.9:
                return self.report(
                    'warn', 'Career Assistant', f'{used}/{config.monthly_token_cap} tokens used this month'
                )
        return self.report('pass', 'Career Assistant', f'Enabled ({config.active_model})')

    def check_pages(self):
        failed = [p for p in SystemMonitor().check_critical_pages() if p['status'] != 'Operational']
        if failed:
            detail = ', '.join(f"{p['name']} ({p['error']})" for p in failed)
            return self.report('fail', 'Pages', detail)
        return self.report('pass', 'Pages', 'All critical pages load')

    def check_log_dir(self):
        log_dir = Path(settings.BASE_DIR) / 'logs'
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return self.report('fail', 'Log Directory', f'Cannot create {log_dir}: {e}')
        return self.report('pass', 'Log Directory', f'{len(list(log_dir.glob("*.log")))} log file(s) in {log_dir}')
