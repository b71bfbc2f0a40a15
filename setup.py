from glob import glob
from setuptools import setup


setup(
    name='smep',
    use_scm_version={
        # Source trees without git history
        'fallback_version': '0.1',
    },
    description='Simplest math evaluation program',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['smep'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
