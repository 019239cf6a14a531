from django.urls import path

from .views import DepartmentListView, EmployeeDetailView, EmployeeListCreateView

urlpatterns = [
    path("employees/", EmployeeListCreateView.as_view(), name="staff_employees"),
    path("employees/<int:pk>/", EmployeeDetailView.as_view(), name="staff_employee_detail"),
    path("departments/", DepartmentListView.as_view(), name="staff_departments"),
]
