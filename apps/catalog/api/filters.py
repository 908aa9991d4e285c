from django.db.models import Q
from django_filters import rest_framework as filters
from apps.catalog.models import Product


class ProductFilter(filters.FilterSet):
    """Filter for the published product listing."""

    category = filters.CharFilter(method='filter_by_category')
    category_id = filters.NumberFilter(field_name='categories__id')

    # Price filters
    min_price = filters.NumberFilter(field_name='price', lookup_expr='gte')
    max_price = filters.NumberFilter(field_name='price', lookup_expr='lte')

    in_stock = filters.BooleanFilter(method='filter_in_stock')

    class Meta:
        model = Product
        fields = ['category', 'category_id', 'is_allow_to_order']

    def filter_by_category(self, queryset, name, value):
        """
        Filter by category slug, including its direct subcategories.
        Example: ?category=tintas
        """
        return queryset.filter(
            Q(categories__slug=value)
            | Q(categories__parent__slug=value)
        ).distinct()

    def filter_in_stock(self, queryset, name, value):
        if value is True:
            return queryset.filter(stock_quantity__gt=0)
        elif value is False:
            return queryset.filter(stock_quantity__lte=0)
        return queryset
