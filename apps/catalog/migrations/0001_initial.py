from decimal import Decimal

from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import simple_history.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Category',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=200, unique=True, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Descrição')),
                ('is_published', models.BooleanField(default=True, verbose_name='Publicado')),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='children', to='catalog.category', verbose_name='Categoria Pai')),
            ],
            options={
                'verbose_name': 'Categoria',
                'verbose_name_plural': 'Categorias',
                'ordering': ['display_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='Media',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('file', models.FileField(upload_to='media/%Y/%m/', verbose_name='Arquivo')),
                ('caption', models.CharField(blank=True, max_length=255, verbose_name='Legenda')),
                ('media_type', models.CharField(choices=[('image', 'Imagem'), ('file', 'Arquivo'), ('video', 'Vídeo')], default='image', max_length=10, verbose_name='Tipo de mídia')),
            ],
            options={
                'verbose_name': 'Mídia',
                'verbose_name_plural': 'Mídias',
            },
        ),
        migrations.CreateModel(
            name='ProductAttribute',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=100, unique=True, verbose_name='Slug')),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
            ],
            options={
                'verbose_name': 'Atributo',
                'verbose_name_plural': 'Atributos',
                'ordering': ['display_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='ProductOption',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=100, unique=True, verbose_name='Slug')),
            ],
            options={
                'verbose_name': 'Opção',
                'verbose_name_plural': 'Opções',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=255, unique=True, verbose_name='Slug')),
                ('normalized_name', models.CharField(blank=True, max_length=255, verbose_name='Nome normalizado')),
                ('short_description', models.TextField(blank=True, verbose_name='Descrição curta')),
                ('description', models.TextField(blank=True, verbose_name='Descrição')),
                ('specification', models.TextField(blank=True, verbose_name='Especificação')),
                ('price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço')),
                ('old_price', models.DecimalField(blank=True, decimal_places=2, help_text='Preço "de" para mostrar desconto', max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço anterior')),
                ('special_price', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço promocional')),
                ('special_price_start', models.DateTimeField(blank=True, null=True, verbose_name='Início da promoção')),
                ('special_price_end', models.DateTimeField(blank=True, null=True, verbose_name='Fim da promoção')),
                ('is_call_for_pricing', models.BooleanField(default=False, verbose_name='Preço sob consulta')),
                ('stock_quantity', models.IntegerField(default=0, verbose_name='Quantidade em estoque')),
                ('is_allow_to_order', models.BooleanField(default=True, verbose_name='Permitir pedido')),
                ('reviews_count', models.PositiveIntegerField(default=0, verbose_name='Número de avaliações')),
                ('rating_average', models.FloatField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(5)], verbose_name='Nota média')),
                ('is_published', models.BooleanField(default=False, verbose_name='Publicado')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('thumbnail_image', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='catalog.media', verbose_name='Miniatura')),
            ],
            options={
                'verbose_name': 'Produto',
                'verbose_name_plural': 'Produtos',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ProductCategory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('is_featured_product', models.BooleanField(default=False, verbose_name='Produto em destaque')),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
                ('category', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='product_categories', to='catalog.category', verbose_name='Categoria')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='product_categories', to='catalog.product', verbose_name='Produto')),
            ],
            options={
                'verbose_name': 'Categoria do Produto',
                'verbose_name_plural': 'Categorias do Produto',
                'ordering': ['display_order', 'id'],
                'unique_together': {('product', 'category')},
            },
        ),
        migrations.AddField(
            model_name='product',
            name='categories',
            field=models.ManyToManyField(blank=True, related_name='products', through='catalog.ProductCategory', to='catalog.category', verbose_name='Categorias'),
        ),
        migrations.CreateModel(
            name='ProductAttributeValue',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('value', models.CharField(max_length=255, verbose_name='Valor')),
                ('attribute', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='values', to='catalog.productattribute', verbose_name='Atributo')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attribute_values', to='catalog.product', verbose_name='Produto')),
            ],
            options={
                'verbose_name': 'Valor de Atributo',
                'verbose_name_plural': 'Valores de Atributos',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='ProductOptionCombination',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('value', models.CharField(max_length=100, verbose_name='Valor')),
                ('sort_index', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
                ('option', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='combinations', to='catalog.productoption', verbose_name='Opção')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='option_combinations', to='catalog.product', verbose_name='Variante')),
            ],
            options={
                'verbose_name': 'Combinação de Opção',
                'verbose_name_plural': 'Combinações de Opções',
                'ordering': ['sort_index', 'id'],
                'unique_together': {('product', 'option')},
            },
        ),
        migrations.CreateModel(
            name='ProductLink',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('link_type', models.CharField(choices=[('super', 'Variante'), ('related', 'Relacionado'), ('cross_sell', 'Venda cruzada')], max_length=20, verbose_name='Tipo de vínculo')),
                ('linked_product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='linked_product_links', to='catalog.product', verbose_name='Produto vinculado')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='product_links', to='catalog.product', verbose_name='Produto')),
            ],
            options={
                'verbose_name': 'Vínculo de Produto',
                'verbose_name_plural': 'Vínculos de Produtos',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='ProductMedia',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
                ('media', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='product_medias', to='catalog.media', verbose_name='Mídia')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='medias', to='catalog.product', verbose_name='Produto')),
            ],
            options={
                'verbose_name': 'Mídia do Produto',
                'verbose_name_plural': 'Mídias do Produto',
                'ordering': ['display_order', 'id'],
            },
        ),
        migrations.CreateModel(
            name='HistoricalProduct',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=255, verbose_name='Slug')),
                ('normalized_name', models.CharField(blank=True, max_length=255, verbose_name='Nome normalizado')),
                ('short_description', models.TextField(blank=True, verbose_name='Descrição curta')),
                ('description', models.TextField(blank=True, verbose_name='Descrição')),
                ('specification', models.TextField(blank=True, verbose_name='Especificação')),
                ('price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço')),
                ('old_price', models.DecimalField(blank=True, decimal_places=2, help_text='Preço "de" para mostrar desconto', max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço anterior')),
                ('special_price', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço promocional')),
                ('special_price_start', models.DateTimeField(blank=True, null=True, verbose_name='Início da promoção')),
                ('special_price_end', models.DateTimeField(blank=True, null=True, verbose_name='Fim da promoção')),
                ('is_call_for_pricing', models.BooleanField(default=False, verbose_name='Preço sob consulta')),
                ('stock_quantity', models.IntegerField(default=0, verbose_name='Quantidade em estoque')),
                ('is_allow_to_order', models.BooleanField(default=True, verbose_name='Permitir pedido')),
                ('reviews_count', models.PositiveIntegerField(default=0, verbose_name='Número de avaliações')),
                ('rating_average', models.FloatField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(5)], verbose_name='Nota média')),
                ('is_published', models.BooleanField(default=False, verbose_name='Publicado')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Atualizado em')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField(db_index=True)),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('thumbnail_image', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='catalog.media', verbose_name='Miniatura')),
            ],
            options={
                'verbose_name': 'historical Produto',
                'verbose_name_plural': 'historical Produtos',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
