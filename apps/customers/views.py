import logging

from django.core.exceptions import ValidationError
from rest_framework import viewsets, status, mixins
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from .models import Name, Customer
from .serializers import NameSerializer, CustomerSerializer
from .exceptions import CustomerNotFoundError

logger = logging.getLogger(__name__)


class NameViewSet(mixins.ListModelMixin,
                  mixins.CreateModelMixin,
                  viewsets.GenericViewSet):
    """
    Passenger name directory.

    list: Names, newest first
    create: Add a name
    """

    queryset = Name.objects.order_by('-created_at')
    serializer_class = NameSerializer
    permission_classes = [IsAuthenticated]


class CustomerViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Customer CRUD operations.

    list: Customers, newest first
    create: Add a customer
    update/partial_update: Edit details
    destroy: Remove a customer
    """

    queryset = Customer.objects.order_by('-created_at')
    serializer_class = CustomerSerializer
    permission_classes = [IsAuthenticated]

    def get_object(self):
        try:
            return Customer.objects.get(pk=self.kwargs['pk'])
        except (Customer.DoesNotExist, ValueError, ValidationError):
            raise CustomerNotFoundError()

    def perform_create(self, serializer):
        customer = serializer.save()
        logger.info(f"Customer {customer.name} added")

    def destroy(self, request, *args, **kwargs):
        customer = self.get_object()
        customer.delete()
        logger.info(f"Customer {customer.name} deleted")
        return Response({'message': 'Customer deleted successfully'}, status=status.HTTP_200_OK)
