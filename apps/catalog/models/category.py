from django.db import models
from django.utils.text import slugify


class Category(models.Model):
    """
    Hierarchical product category.
    The slug doubles as the SEO title used to build category breadcrumbs.
    """
    name = models.CharField(
        max_length=200,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=200,
        unique=True,
        verbose_name='Slug'
    )
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='children',
        verbose_name='Categoria Pai'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Descrição'
    )
    is_published = models.BooleanField(
        default=True,
        verbose_name='Publicado'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['display_order', 'name']
        verbose_name = 'Categoria'
        verbose_name_plural = 'Categorias'

    def __str__(self):
        return self.full_path

    @property
    def full_path(self):
        """Breadcrumb text: Parent > Child > Grandchild"""
        return ' > '.join([c.name for c in self.get_ancestors()] + [self.name])

    def get_ancestors(self):
        """Ancestor categories, root first."""
        ancestors = []
        current = self.parent
        while current:
            ancestors.insert(0, current)
            current = current.parent
        return ancestors

    def save(self, *args, **kwargs):
        if not self.slug:
            base_slug = slugify(self.name)
            self.slug = base_slug
            counter = 1
            while Category.objects.filter(slug=self.slug).exclude(pk=self.pk).exists():
                self.slug = f"{base_slug}-{counter}"
                counter += 1
        super().save(*args, **kwargs)
