from django.db import models
from django.utils.text import slugify


class ProductAttribute(models.Model):
    """
    Descriptive attribute definition shown in the product specification table.
    Examples: Marca, Material, Garantia.
    """
    name = models.CharField(
        max_length=100,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=100,
        unique=True,
        verbose_name='Slug'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'name']
        verbose_name = 'Atributo'
        verbose_name_plural = 'Atributos'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)


class ProductAttributeValue(models.Model):
    """
    Value of an attribute for one product.
    A product may hold several values for the same attribute; all of them are shown.
    """
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='attribute_values',
        verbose_name='Produto'
    )
    attribute = models.ForeignKey(
        ProductAttribute,
        on_delete=models.CASCADE,
        related_name='values',
        verbose_name='Atributo'
    )
    value = models.CharField(
        max_length=255,
        verbose_name='Valor'
    )

    class Meta:
        ordering = ['id']
        verbose_name = 'Valor de Atributo'
        verbose_name_plural = 'Valores de Atributos'

    def __str__(self):
        return f"{self.attribute.name}: {self.value}"
