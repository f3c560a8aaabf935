from setuptools import setup, find_packages


setup(
    name='infixcalc',
    use_scm_version={'fallback_version': '0.1.0'},
    description='Keypad infix calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    entry_points={
        'console_scripts': [
            'infixcalc = infixcalc.cli:main',
        ],
    },
    license='ISC',
)
