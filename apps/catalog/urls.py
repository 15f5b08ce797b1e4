from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'catalog'

router = SimpleRouter(trailing_slash=False)
router.register(r'products', views.ProductViewSet, basename='product')

urlpatterns = [
    # GET    /api/products              - List products
    # POST   /api/products              - Create product (admin)
    # GET    /api/products/{id}         - Get product
    # PATCH  /api/products/{id}         - Edit product (admin)
    # PATCH  /api/products/{id}/price   - Change price (admin)
    # DELETE /api/products/{id}         - Delete product (admin)
    path('', include(router.urls)),
]
