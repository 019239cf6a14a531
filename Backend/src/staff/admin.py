from django.contrib import admin

from .models import Department, Employee


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "created_at")
    search_fields = ("name",)


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    """Les règles de Employee.clean() s'appliquent aussi aux formulaires de l'admin."""

    list_display = ("id", "last_name", "first_name", "email", "age", "department", "hire_date")
    list_filter = ("department",)
    search_fields = ("first_name", "last_name", "email")
    readonly_fields = ("created_by", "created_at", "updated_at")

    def save_model(self, request, obj, form, change):
        if not change and obj.created_by_id is None:
            obj.created_by = request.user
        super().save_model(request, obj, form, change)
