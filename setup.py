import os
from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, "README.md"), "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name='valueaxis',
    version=os.environ.get("RELEASE_VERSION", "0.1.0"),
    packages=find_packages(where='src', include=['valueaxis', 'valueaxis.*']),
    package_dir={'': 'src'},
    install_requires=[
        'PySide6',
        'numpy',
    ],
    description='A vertical value axis widget for graph and timeline views based on PySide6',
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
    ],
    python_requires='>=3.9',
)
