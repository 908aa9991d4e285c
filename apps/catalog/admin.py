from django.contrib import admin
from django.utils.html import format_html
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget
from adminsortable2.admin import SortableAdminBase, SortableInlineAdminMixin
from simple_history.admin import SimpleHistoryAdmin

from .models import (
    Product,
    ProductCategory,
    Category,
    ProductAttribute,
    ProductAttributeValue,
    ProductOption,
    ProductOptionCombination,
    ProductLink,
    ProductLinkType,
    Media,
    ProductMedia,
)


# =============================================================================
# Import/Export Resources
# =============================================================================

class ProductResource(resources.ModelResource):
    """Resource for importing/exporting products."""

    thumbnail_caption = fields.Field(
        column_name='thumbnail',
        attribute='thumbnail_image',
        widget=ForeignKeyWidget(Media, 'caption')
    )

    class Meta:
        model = Product
        import_id_fields = ['slug']
        fields = (
            'slug', 'name', 'short_description', 'price', 'old_price',
            'special_price', 'stock_quantity', 'is_allow_to_order',
            'is_call_for_pricing', 'is_published', 'thumbnail_caption'
        )
        export_order = fields


# =============================================================================
# Inlines
# =============================================================================

class ProductCategoryInline(admin.TabularInline):
    model = ProductCategory
    extra = 1
    autocomplete_fields = ['category']
    fields = ['category', 'is_featured_product', 'display_order']


class ProductAttributeValueInline(admin.TabularInline):
    model = ProductAttributeValue
    extra = 1
    autocomplete_fields = ['attribute']


class ProductOptionCombinationInline(SortableInlineAdminMixin, admin.TabularInline):
    model = ProductOptionCombination
    extra = 1
    autocomplete_fields = ['option']
    fields = ['option', 'value', 'sort_index']


class ProductLinkInline(admin.TabularInline):
    model = ProductLink
    fk_name = 'product'
    extra = 1
    autocomplete_fields = ['linked_product']
    fields = ['linked_product', 'link_type']


class ProductMediaInline(SortableInlineAdminMixin, admin.TabularInline):
    model = ProductMedia
    extra = 1
    raw_id_fields = ['media']
    fields = ['media', 'display_order', 'media_preview']
    readonly_fields = ['media_preview']

    def media_preview(self, obj):
        if obj.pk and obj.media.is_image and obj.media.file:
            return format_html(
                '<img src="{}" style="max-height: 50px; max-width: 100px;" />',
                obj.media.thumbnail.url
            )
        return '-'
    media_preview.short_description = 'Preview'


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Product)
class ProductAdmin(SortableAdminBase, ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = ProductResource
    list_display = [
        'name', 'slug', 'price', 'stock_quantity', 'variant_count',
        'is_published', 'created_at'
    ]
    list_filter = ['is_published', 'is_allow_to_order', 'is_call_for_pricing', 'created_at']
    list_editable = ['is_published']
    search_fields = ['name', 'slug', 'short_description']
    prepopulated_fields = {'slug': ('name',)}
    readonly_fields = ['normalized_name', 'created_at', 'updated_at']
    raw_id_fields = ['thumbnail_image']
    inlines = [
        ProductCategoryInline,
        ProductAttributeValueInline,
        ProductOptionCombinationInline,
        ProductLinkInline,
        ProductMediaInline,
    ]
    list_per_page = 50

    fieldsets = (
        (None, {
            'fields': ('name', 'slug', 'normalized_name', 'is_published', 'thumbnail_image')
        }),
        ('Descrição', {
            'fields': ('short_description', 'description', 'specification')
        }),
        ('Preços', {
            'fields': (
                'price', 'old_price', 'special_price',
                'special_price_start', 'special_price_end', 'is_call_for_pricing'
            )
        }),
        ('Estoque', {
            'fields': ('stock_quantity', 'is_allow_to_order')
        }),
        ('Avaliações', {
            'fields': ('reviews_count', 'rating_average'),
            'classes': ('collapse',)
        }),
        ('Informações', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['publish_products', 'unpublish_products']

    def variant_count(self, obj):
        return obj.product_links.filter(link_type=ProductLinkType.SUPER).count()
    variant_count.short_description = 'Variantes'

    @admin.action(description='Publicar produtos selecionados')
    def publish_products(self, request, queryset):
        count = queryset.update(is_published=True)
        self.message_user(request, f'{count} produtos publicados.')

    @admin.action(description='Despublicar produtos selecionados')
    def unpublish_products(self, request, queryset):
        count = queryset.update(is_published=False)
        self.message_user(request, f'{count} produtos despublicados.')


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['full_path', 'slug', 'is_published', 'display_order']
    list_filter = ['is_published']
    list_editable = ['display_order']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}
    autocomplete_fields = ['parent']


@admin.register(ProductAttribute)
class ProductAttributeAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'display_order']
    list_editable = ['display_order']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}


@admin.register(ProductOption)
class ProductOptionAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}


@admin.register(Media)
class MediaAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'media_type', 'media_preview']
    list_filter = ['media_type']
    search_fields = ['caption', 'file']

    def media_preview(self, obj):
        if obj.is_image and obj.file:
            return format_html(
                '<img src="{}" style="max-height: 40px; max-width: 60px;" />',
                obj.thumbnail.url
            )
        return '-'
    media_preview.short_description = 'Imagem'


# =============================================================================
# Admin Site Configuration
# =============================================================================

admin.site.site_header = 'Catálogo Admin'
admin.site.site_title = 'Catálogo'
admin.site.index_title = 'Painel de Administração'
