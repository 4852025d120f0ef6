# setup.py
from setuptools import setup, find_packages

setup(
    name="glyphls",
    version="0.1.0",
    description="Listado de directorios con iconos Nerd Font, colores y columnas adaptadas a la terminal",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # Encuentra automáticamente la carpeta 'glyphls'
    package_data={
        "glyphls": ["resources/*.toml"],  # Documento de configuración por defecto
    },
    python_requires=">=3.11",
    install_requires=[
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'glyphls=glyphls.main:main',  # Permite ejecutar el listado vía CLI
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
