"""
==========================================================
BRANDING & IDENTITY
==========================================================
Fallback identity used when the SiteSettings record leaves a field blank.
Every template, page title and assistant fallback reads from here.
"""

# --- Core Identity ---
SITE_NAME = "Fortex Education"
SITE_TAGLINE = "Admissions guidance for nursing, allied health, engineering and beyond."
SITE_DESCRIPTION = "Career counselling and admissions support in Wayanad and Malappuram."
SITE_FULL_TITLE = "Fortex Education | Admissions & Career Guidance"

# --- Company Info ---
COMPANY_NAME = "Fortex Education"
COMPANY_EMAIL = "info@fortexeducation.com"
COMPANY_PHONE = "+91 70253 37762"
COMPANY_ADDRESS = "Kalpetta, Wayanad, Kerala 673121"
COMPANY_WHATSAPP = "917025337762"

# --- SEO & Meta ---
META_TITLE_SUFFIX = f" | {SITE_NAME}"
META_DESCRIPTION = SITE_TAGLINE
META_KEYWORDS = "education, admissions, nursing, GNM, MLT, BCA, engineering, Kerala, career guidance"

# --- Copyright ---
COPYRIGHT_YEAR = "2026"
COPYRIGHT_TEXT = f"© {COPYRIGHT_YEAR} {COMPANY_NAME}. All rights reserved."
