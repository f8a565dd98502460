import logging

from django.core.exceptions import ValidationError
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .models import SalaryRecord
from .serializers import (
    SalaryRecordSerializer,
    SalaryInputSerializer,
    SalaryCalculateSerializer,
    SalaryCalculationSerializer,
)
from .services import (
    calculate_salary,
    create_salary_record,
    update_salary_record,
    resolve_previous_salary,
)
from .exceptions import SalaryServiceError, SalaryRecordNotFoundError

logger = logging.getLogger(__name__)


class SalaryRecordViewSet(viewsets.ModelViewSet):
    """
    Yearly salary history.

    list: All years, latest first
    create: Add a year (derived figures computed)
    update/partial_update: Change inputs, figures recomputed
    destroy: Remove a year
    by_year: Look a record up by year
    calculate: Preview figures without saving
    """

    queryset = SalaryRecord.objects.order_by('-year')
    serializer_class = SalaryRecordSerializer
    permission_classes = [IsAuthenticated]

    def get_object(self):
        try:
            return SalaryRecord.objects.get(pk=self.kwargs['pk'])
        except (SalaryRecord.DoesNotExist, ValueError, ValidationError):
            raise SalaryRecordNotFoundError()

    @extend_schema(request=SalaryInputSerializer, responses={201: SalaryRecordSerializer})
    def create(self, request, *args, **kwargs):
        serializer = SalaryInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            record = create_salary_record(**serializer.validated_data)
        except SalaryServiceError as e:
            return Response({'message': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(SalaryRecordSerializer(record).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=SalaryInputSerializer, responses={200: SalaryRecordSerializer})
    def update(self, request, *args, **kwargs):
        record = self.get_object()
        serializer = SalaryInputSerializer(data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)

        try:
            record = update_salary_record(record=record, **serializer.validated_data)
        except SalaryServiceError as e:
            return Response({'message': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(SalaryRecordSerializer(record).data)

    def destroy(self, request, *args, **kwargs):
        record = self.get_object()
        year = record.year
        record.delete()
        logger.info(f"Salary record for {year} deleted")
        return Response({'message': 'Salary record deleted'}, status=status.HTTP_200_OK)

    @extend_schema(responses={200: SalaryRecordSerializer})
    @action(detail=False, methods=['get'], url_path=r'year/(?P<year>\d{4})')
    def by_year(self, request, year=None):
        """
        Salary record for one year.

        GET /api/salary/year/{year}/
        """
        record = SalaryRecord.objects.filter(year=int(year)).first()
        if record is None:
            raise SalaryRecordNotFoundError()
        return Response(SalaryRecordSerializer(record).data)

    @extend_schema(request=SalaryCalculateSerializer, responses={200: SalaryCalculationSerializer})
    @action(detail=False, methods=['post'])
    def calculate(self, request):
        """
        Compute salary figures without saving anything.

        POST /api/salary/calculate/
        Body: {"previous_salary": 100000, "hike_percentage": 10, "revision_percentage": 5}
        """
        serializer = SalaryCalculateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            previous_salary = resolve_previous_salary(
                year=data.get('year'),
                previous_salary=data.get('previous_salary'),
            )
        except SalaryServiceError as e:
            return Response({'message': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        figures = calculate_salary(
            previous_salary=previous_salary,
            hike_percentage=data['hike_percentage'],
            revision_percentage=data['revision_percentage'],
            bonus_percentage=data['bonus_percentage'],
        )
        return Response(SalaryCalculationSerializer(figures).data)
