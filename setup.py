from setuptools import setup, find_packages

setup(
    name="scatterplay",
    version="0.1.0",
    description="Correlation & Regression Explorer",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        'PyQt6>=6.6.1',
        'matplotlib>=3.8.0',
        'numpy>=1.26.0',
        'PyYAML>=6.0',
    ],
    extras_require={
        'dev': [
            'pytest>=8.0.0',
            'pytest-qt>=4.4.0',
            'pytest-cov>=6.0.0',
            'pytest-mock>=3.12.0',
            'black>=24.1.0',
            'flake8>=7.0.0',
            'mypy>=1.8.0'
        ]
    },
    entry_points={
        'console_scripts': [
            'scatterplay=scatterplay.main:main',
        ],
    },
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Education',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
