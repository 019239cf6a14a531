import logging

from django.db.models import Count
from rest_framework import generics, permissions

from common.utils import name_key

from .models import Department, Employee
from .serializers import DepartmentSerializer, EmployeeSerializer

logger = logging.getLogger(__name__)


class EmployeeListCreateView(generics.ListCreateAPIView):
    """
    GET  /api/staff/employees/?department=<nom>
    POST /api/staff/employees/ -> serializer (validation) -> perform_create (contexte) -> Employee.save()
    """

    serializer_class = EmployeeSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        qs = Employee.objects.select_related("department", "created_by")
        department = self.request.query_params.get("department")
        if department:
            qs = qs.filter(department__name_key=name_key(department))
        return qs

    def perform_create(self, serializer):
        # created_by vient de la requête, jamais du client
        employee = serializer.save(created_by=self.request.user)
        logger.info(
            f"[staff] Employé créé id={employee.pk} par user={self.request.user.pk} "
            f"request_id={getattr(self.request, 'request_id', '-')}"
        )


class EmployeeDetailView(generics.RetrieveUpdateDestroyAPIView):
    """GET / PUT / PATCH / DELETE /api/staff/employees/<id>/"""

    queryset = Employee.objects.select_related("department", "created_by")
    serializer_class = EmployeeSerializer
    permission_classes = [permissions.IsAuthenticated]

    def perform_update(self, serializer):
        employee = serializer.save()
        logger.info(f"[staff] Employé modifié id={employee.pk} par user={self.request.user.pk}")

    def perform_destroy(self, instance):
        logger.info(f"[staff] Employé supprimé id={instance.pk} par user={self.request.user.pk}")
        instance.delete()


class DepartmentListView(generics.ListAPIView):
    """GET /api/staff/departments/ -> départements + nombre d'employés"""

    queryset = Department.objects.annotate(employee_count=Count("employees"))
    serializer_class = DepartmentSerializer
    permission_classes = [permissions.IsAuthenticated]
