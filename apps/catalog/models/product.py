from decimal import Decimal

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.utils.text import slugify
from simple_history.models import HistoricalRecords


class Product(models.Model):
    """
    Sellable product.
    A product can be the parent of variants (linked with a SUPER product link)
    or be shown next to other products as related or cross-sell items.
    """
    name = models.CharField(
        max_length=255,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=255,
        unique=True,
        verbose_name='Slug'
    )
    normalized_name = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Nome normalizado'
    )
    short_description = models.TextField(
        blank=True,
        verbose_name='Descrição curta'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Descrição'
    )
    specification = models.TextField(
        blank=True,
        verbose_name='Especificação'
    )
    categories = models.ManyToManyField(
        'catalog.Category',
        through='catalog.ProductCategory',
        blank=True,
        related_name='products',
        verbose_name='Categorias'
    )
    thumbnail_image = models.ForeignKey(
        'catalog.Media',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        verbose_name='Miniatura'
    )

    # Pricing
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço'
    )
    old_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço anterior',
        help_text='Preço "de" para mostrar desconto'
    )
    special_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço promocional'
    )
    special_price_start = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Início da promoção'
    )
    special_price_end = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Fim da promoção'
    )
    is_call_for_pricing = models.BooleanField(
        default=False,
        verbose_name='Preço sob consulta'
    )

    # Inventory
    stock_quantity = models.IntegerField(
        default=0,
        verbose_name='Quantidade em estoque'
    )
    is_allow_to_order = models.BooleanField(
        default=True,
        verbose_name='Permitir pedido'
    )

    # Reviews
    reviews_count = models.PositiveIntegerField(
        default=0,
        verbose_name='Número de avaliações'
    )
    rating_average = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
        verbose_name='Nota média'
    )

    # Status
    is_published = models.BooleanField(
        default=False,
        verbose_name='Publicado'
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    # History tracking
    history = HistoricalRecords()

    class Meta:
        ordering = ['name']
        verbose_name = 'Produto'
        verbose_name_plural = 'Produtos'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        if not self.normalized_name:
            self.normalized_name = slugify(self.name)
        super().save(*args, **kwargs)

    @property
    def has_special_price(self):
        return self.special_price is not None


class ProductCategory(models.Model):
    """Through model linking Product to Category."""
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='product_categories',
        verbose_name='Produto'
    )
    category = models.ForeignKey(
        'catalog.Category',
        on_delete=models.CASCADE,
        related_name='product_categories',
        verbose_name='Categoria'
    )
    is_featured_product = models.BooleanField(
        default=False,
        verbose_name='Produto em destaque'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'id']
        unique_together = ['product', 'category']
        verbose_name = 'Categoria do Produto'
        verbose_name_plural = 'Categorias do Produto'

    def __str__(self):
        return f"{self.product.name} - {self.category.name}"
