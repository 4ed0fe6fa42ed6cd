"""
==========================================================
USER-FACING MESSAGES
==========================================================
All success, error, and info messages shown to visitors and admins.
Change the wording once → updates across the entire site.
"""

from .branding import SITE_NAME, COMPANY_PHONE

# --- Auth ---
MSG_LOGIN_HEADING = f"Sign in to {SITE_NAME}"
MSG_SIGNUP_SUCCESS = "Welcome! Your student account is ready."
MSG_LOGIN_REQUIRED = "Please sign in to register your interest."

# --- Home Page ---
MSG_HOME_WELCOME = f"Welcome to {SITE_NAME}"
MSG_HOME_CTA = "Start Your Journey"

# --- Consultations ---
MSG_CONSULTATION_BOOKED = "Consultation booked! Our counsellor will call you shortly."
MSG_CONSULTATION_FAILED = "Failed to book consultation. Please try again."
MSG_BOOKING_CLOSED = "Consultation booking is currently unavailable."

# --- Inquiries ---
MSG_INQUIRY_SENT = "Inquiry sent successfully!"
MSG_INQUIRY_FAILED = "Failed to send inquiry."

# --- Leads ---
MSG_LEAD_REGISTERED = "Interest registered for {name}. We will contact you shortly."
MSG_LEAD_STUDENTS_ONLY = "Only student accounts can register interest."

# --- Profile ---
MSG_PROFILE_UPDATED = "Profile updated successfully!"
MSG_PROFILE_FAILED = "Failed to update profile."

# --- Admin ---
MSG_SETTINGS_SAVED = "Site settings updated successfully!"
MSG_SETTINGS_FAILED = "Failed to save settings."
MSG_SECTION_SHOWN = '"{name}" is now visible.'
MSG_SECTION_HIDDEN = '"{name}" is now hidden.'
MSG_ITEM_SAVED = "{label} saved."
MSG_ITEM_DELETED = "{label} deleted."
MSG_ITEM_FAILED = "Failed to save item. Please try again."
MSG_DELETE_FAILED = "Failed to delete item."
MSG_MARKED_READ = "Marked as read."
MSG_LLM_CONFIG_SAVED = "Assistant configuration updated successfully."

# --- Assistant ---
MSG_ASSISTANT_GREETING = (
    f"Hello! I'm your {SITE_NAME} AI Assistant. Tell me a bit about your interests, "
    "and I'll suggest the best career path for you."
)
MSG_ASSISTANT_UNAVAILABLE = (
    "I'm sorry, I'm having trouble generating advice at the moment. "
    f"Please call us at {COMPANY_PHONE} for immediate assistance."
)
MSG_ASSISTANT_CONNECTION_ERROR = (
    "I'm sorry, I'm having trouble connecting right now. "
    f"Please call us at {COMPANY_PHONE} for immediate assistance."
)

# --- Generic ---
MSG_PERMISSION_DENIED = "You do not have permission to perform this action."
MSG_GENERIC_ERROR = "Something went wrong. Please try again."
