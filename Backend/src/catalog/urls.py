from django.urls import path

from .views import CategoryDetailView, CategoryListCreateView

urlpatterns = [
    path("categories/", CategoryListCreateView.as_view(), name="catalog_categories"),
    path("categories/<slug:slug>/", CategoryDetailView.as_view(), name="catalog_category_detail"),
]
