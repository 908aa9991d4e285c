from django.db import models
from django.utils.text import slugify


class ProductOption(models.Model):
    """
    Dimension along which variants differ.
    Examples: Cor, Tamanho, Material.
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

    class Meta:
        ordering = ['name']
        verbose_name = 'Opção'
        verbose_name_plural = 'Opções'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)


class ProductOptionCombination(models.Model):
    """
    One option value of a variant, e.g. Cor=Vermelho.
    sort_index fixes the order in which a variant's options are displayed.
    """
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='option_combinations',
        verbose_name='Variante'
    )
    option = models.ForeignKey(
        ProductOption,
        on_delete=models.CASCADE,
        related_name='combinations',
        verbose_name='Opção'
    )
    value = models.CharField(
        max_length=100,
        verbose_name='Valor'
    )
    sort_index = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['sort_index', 'id']
        unique_together = ['product', 'option']
        verbose_name = 'Combinação de Opção'
        verbose_name_plural = 'Combinações de Opções'

    def __str__(self):
        return f"{self.option.name}: {self.value}"
