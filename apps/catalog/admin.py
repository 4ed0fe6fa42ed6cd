from django.contrib import admin
from .models import Service, College, University, Event, EducationInsight, Review


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ('title', 'order', 'created_at')
    search_fields = ('title', 'description')


@admin.register(College, University)
class InstitutionAdmin(admin.ModelAdmin):
    list_display = ('name', 'location', 'website_url')
    list_filter = ('location',)
    search_fields = ('name', 'location')


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ('title', 'type', 'date', 'location', 'created_at')
    list_filter = ('type', 'date')
    search_fields = ('title', 'location')


@admin.register(EducationInsight)
class EducationInsightAdmin(admin.ModelAdmin):
    list_display = ('name', 'service_tag', 'youtube_link')
    search_fields = ('name', 'service_tag')


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ('student_name', 'program', 'rating', 'created_at')
    list_filter = ('rating',)
    search_fields = ('student_name', 'program', 'content')
