from decouple import config
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from catalog.models import Service
from core.models import SiteSettings

User = get_user_model()

COURSE_CATEGORIES = [
    {
        'title': 'Allied Science',
        'description': 'Explore diverse fields in allied health sciences including laboratory technology, '
                       'radiology, and medical imaging. Build a rewarding career in healthcare support services.',
        'image_url': '/courses/allied science.png',
    },
    {
        'title': 'Aviation',
        'description': 'Pursue your dreams of flying high with comprehensive aviation programs. From pilot '
                       'training to aviation management, chart your course in the skies.',
        'image_url': '/courses/aviation.png',
    },
    {
        'title': 'Commerce',
        'description': 'Master the fundamentals of business, accounting, and finance. Develop skills in '
                       'economics, taxation, and corporate management for a successful business career.',
        'image_url': '/courses/commerse.png',
    },
    {
        'title': 'Designing',
        'description': 'Unleash your creativity with programs in graphic design, fashion design, interior '
                       'design, and more. Transform your artistic vision into a professional career.',
        'image_url': '/courses/designing.png',
    },
    {
        'title': 'Engineering',
        'description': 'Build the future with cutting-edge engineering programs. From civil to computer '
                       'science, mechanical to electrical - choose your path to innovation.',
        'image_url': '/courses/engineering.png',
    },
    {
        'title': 'General Degree',
        'description': 'Pursue a well-rounded education with general degree programs in arts, science, and '
                       'humanities. Develop critical thinking and diverse knowledge across disciplines.',
        'image_url': '/courses/general degree.png',
    },
    {
        'title': 'Law',
        'description': 'Champion justice with comprehensive legal education. Prepare for a career in '
                       'litigation, corporate law, or judicial services with expert guidance.',
        'image_url': '/courses/law.png',
    },
    {
        'title': 'Management',
        'description': 'Lead with confidence through MBA and management programs. Develop strategic thinking, '
                       'leadership skills, and business acumen for executive success.',
        'image_url': '/courses/management.png',
    },
    {
        'title': 'Medical',
        'description': 'Embark on a noble journey in medicine. From MBBS to specialized medical programs, '
                       'prepare to heal and serve humanity with excellence.',
        'image_url': '/courses/medical.png',
    },
    {
        'title': 'Paramedical',
        'description': 'Join the frontline of healthcare with paramedical programs. Train in emergency medical '
                       'services, nursing, and critical care support.',
        'image_url': '/courses/paramedical.png',
    },
    {
        'title': 'Pharmacy',
        'description': 'Become a healthcare expert in pharmaceutical sciences. Study drug development, '
                       'clinical pharmacy, and pharmaceutical management.',
        'image_url': '/courses/pharmacy.png',
    },
    {
        'title': 'Sports',
        'description': 'Turn your passion for sports into a profession. Explore sports management, physical '
                       'education, and sports science programs.',
        'image_url': '/courses/sports.png',
    },
]


class Command(BaseCommand):
    help = 'Seeds the database with the admin account, site settings and course categories'

    def handle(self, *args, **kwargs):
        self.stdout.write('Seeding data...')

        # Create Admin
        password = config('ADMIN_PASSWORD', default='')
        if not User.objects.filter(username='admin').exists():
            if password:
                User.objects.create_superuser('admin', 'admin@fortexeducation.com', password)
                self.stdout.write(self.style.SUCCESS('Created superuser: admin'))
            else:
                self.stdout.write(self.style.WARNING('ADMIN_PASSWORD not set; skipping superuser'))

        # Site settings singleton
        SiteSettings.load()
        self.stdout.write(self.style.SUCCESS('Site settings ready'))

        # Course categories
        existing = Service.objects.count()
        if existing:
            self.stdout.write(
                f'Found {existing} existing course categories. Skipping seeding to avoid duplicates.'
            )
        else:
            for course in COURSE_CATEGORIES:
                Service.objects.create(**course)
                self.stdout.write(self.style.SUCCESS(f'Added: {course["title"]}'))

        self.stdout.write(self.style.SUCCESS('Data seeding complete!'))
