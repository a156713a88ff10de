from django.urls import path
from . import views

urlpatterns = [
    path('config/', views.QuizConfigView.as_view(), name='quiz-config'),
    path('recommend/', views.QuizRecommendationView.as_view(), name='quiz-recommend'),
]
