from django.core.exceptions import ValidationError
from django.db import models


class ProductLinkType(models.TextChoices):
    SUPER = 'super', 'Variante'
    RELATED = 'related', 'Relacionado'
    CROSS_SELL = 'cross_sell', 'Venda cruzada'


class ProductLink(models.Model):
    """
    Directed edge between two products.

    - SUPER: product is the parent, linked_product one of its variants.
      The edge points parent -> variant, so variants are found through
      their inbound links (linked_product_links), never the other way round.
    - RELATED / CROSS_SELL: linked_product is shown on product's page.

    The link type can't change once the link exists.
    """
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='product_links',
        verbose_name='Produto'
    )
    linked_product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='linked_product_links',
        verbose_name='Produto vinculado'
    )
    link_type = models.CharField(
        max_length=20,
        choices=ProductLinkType.choices,
        verbose_name='Tipo de vínculo'
    )

    class Meta:
        ordering = ['id']
        verbose_name = 'Vínculo de Produto'
        verbose_name_plural = 'Vínculos de Produtos'

    def __str__(self):
        return f"{self.product} -> {self.linked_product} ({self.get_link_type_display()})"

    def clean(self):
        super().clean()
        self.validate_link_type_unchanged()

    def validate_link_type_unchanged(self):
        if not self.pk:
            return
        stored_type = ProductLink.objects.filter(pk=self.pk).values_list('link_type', flat=True).first()
        if stored_type is not None and stored_type != self.link_type:
            raise ValidationError({'link_type': 'O tipo de vínculo não pode ser alterado.'})

    def save(self, *args, **kwargs):
        self.validate_link_type_unchanged()
        super().save(*args, **kwargs)
