from django.contrib import admin
from .models import Consultation, Inquiry, Lead


@admin.register(Consultation)
class ConsultationAdmin(admin.ModelAdmin):
    list_display = ('name', 'phone', 'interest', 'date', 'read', 'created_at')
    list_filter = ('read', 'interest', 'created_at')
    search_fields = ('name', 'phone', 'interest')
    date_hierarchy = 'created_at'


@admin.register(Inquiry)
class InquiryAdmin(admin.ModelAdmin):
    list_display = ('name', 'phone', 'subject', 'read', 'created_at')
    list_filter = ('read', 'subject')
    search_fields = ('name', 'phone', 'message')


@admin.register(Lead)
class LeadAdmin(admin.ModelAdmin):
    list_display = ('student_name', 'kind', 'target_name', 'student_phone', 'read', 'created_at')
    list_filter = ('kind', 'read', 'created_at')
    search_fields = ('student_name', 'student_email', 'target_name')
