from django.contrib import admin

from .models import Donor


@admin.register(Donor)
class DonorAdmin(admin.ModelAdmin):
    list_display   = ['name', 'blood_group', 'location_display', 'phone_display', 'is_available', 'can_donate_display']
    list_filter    = ['blood_group', 'is_available']
    search_fields  = ['name', 'location_normalized', 'phone_digits']
    ordering       = ['-created_at']
    readonly_fields = ['id', 'phone_digits', 'location_normalized', 'next_eligible_date', 'created_at', 'updated_at']

    fieldsets = (
        ('Personal Info', {
            'fields': ('id', 'name', 'blood_group', 'consent_given')
        }),
        ('Contact', {
            'fields': ('phone_display', 'phone_digits')
        }),
        ('Location', {
            'fields': ('location_display', 'location_normalized')
        }),
        ('Donation', {
            'fields': ('is_available', 'last_donation_date', 'next_eligible_date')
        }),
        ('Photo', {
            'fields': ('photo_url', 'photo_public_id'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    @admin.display(boolean=True, description='Can Donate Now')
    def can_donate_display(self, obj):
        return obj.can_donate

    actions = ['mark_available', 'mark_unavailable']

    @admin.action(description='Mark selected donors as available')
    def mark_available(self, request, queryset):
        updated = queryset.update(is_available=True)
        self.message_user(request, f'{updated} donor(s) marked as available.')

    @admin.action(description='Mark selected donors as unavailable')
    def mark_unavailable(self, request, queryset):
        updated = queryset.update(is_available=False)
        self.message_user(request, f'{updated} donor(s) marked as unavailable.')
