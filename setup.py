import os
from setuptools import setup, find_packages

def parse_requirements(filename):
    """
    Load requirements from a pip requirements file.
    The path is relative to this setup.py file.
    """
    filepath = os.path.join(os.path.dirname(__file__), filename)
    if not os.path.exists(filepath):
        print(f"Warning: Requirements file not found at '{filepath}'. Skipping.")
        return []

    with open(filepath, 'r') as f:
        return [
            line.strip()
            for line in f
            if line.strip() and not line.startswith('#')
        ]

requirements = parse_requirements('requirements.txt')

# Read README for long description, if it exists
try:
    with open('README.md', 'r') as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = 'A local dashboard for managing Shopify webhook subscriptions.'


setup(
    name='shopify-webhooks-dashboard',
    version='1.0.0',
    description='A local dashboard server that proxies Shopify webhook management calls.',
    long_description=long_description,
    long_description_content_type='text/markdown',

    package_dir={'': 'src'},
    packages=find_packages('src'),
    package_data={'webhooks_dashboard': ['dist/*']},
    include_package_data=True,

    install_requires=requirements,
    extras_require={
        'test': ['pytest>=7', 'httpx'],
    },
    entry_points={
        'console_scripts': [
            'webhooks-dashboard=webhooks_dashboard.cli:main',
        ],
    },

    classifiers=[
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Operating System :: OS Independent',
        'Framework :: FastAPI',
    ],
    python_requires='>=3.8',
)
