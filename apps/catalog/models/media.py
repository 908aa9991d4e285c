from django.db import models
from imagekit.models import ImageSpecField
from imagekit.processors import ResizeToFill


class MediaType(models.TextChoices):
    IMAGE = 'image', 'Imagem'
    FILE = 'file', 'Arquivo'
    VIDEO = 'video', 'Vídeo'


class Media(models.Model):
    """Uploaded file. Only IMAGE media get a generated thumbnail."""
    file = models.FileField(
        upload_to='media/%Y/%m/',
        verbose_name='Arquivo'
    )
    caption = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Legenda'
    )
    media_type = models.CharField(
        max_length=10,
        choices=MediaType.choices,
        default=MediaType.IMAGE,
        verbose_name='Tipo de mídia'
    )
    thumbnail = ImageSpecField(
        source='file',
        processors=[ResizeToFill(300, 300)],
        format='JPEG',
        options={'quality': 70}
    )

    class Meta:
        verbose_name = 'Mídia'
        verbose_name_plural = 'Mídias'

    def __str__(self):
        return self.caption or self.file.name

    @property
    def is_image(self):
        return self.media_type == MediaType.IMAGE


class ProductMedia(models.Model):
    """Gallery entry of a product."""
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='medias',
        verbose_name='Produto'
    )
    media = models.ForeignKey(
        Media,
        on_delete=models.CASCADE,
        related_name='product_medias',
        verbose_name='Mídia'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'id']
        verbose_name = 'Mídia do Produto'
        verbose_name_plural = 'Mídias do Produto'

    def __str__(self):
        return f"{self.product.name} - {self.media}"
