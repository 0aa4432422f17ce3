from setuptools import setup, find_packages

setup(
    name="shipping-zone-methods-api",
    version="0.1.0",
    packages=find_packages(),
    py_modules=["manage", "migrate"],
    description="Shipping Zone Methods REST API",
    python_requires=">=3.8",
    extras_require={
        "dev": [
            "Werkzeug",
            "pipdeptree",
            "django_extensions",
        ],
        "test": [
            "factory_boy",
            "mockito",
            "pytest",
            "pytest-django",
        ],
    },
    install_requires=[
        "Django>=4.2",
        "django-environ",
        "django-cors-headers",
        "djangorestframework",
        "drf-nested-routers",
        "drf-yasg",
        "pymysql",
    ],
)
