from django.urls import path

from test_serialization import views

urlpatterns = [
    path('authors/<str:first_name>/', views.AuthorView.as_view()),
    path('authors/<str:first_name>/rendered/',
         views.RenderedAuthorView.as_view()),
    path('tags/<str:label_text>/', views.TagView.as_view()),
    path('tags/<str:label_text>/rendered/', views.RenderedTagView.as_view()),
]
