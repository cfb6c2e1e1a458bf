from setuptools import setup, find_packages

setup(
    name='pullhandle',
    version='1.0.0',
    packages=find_packages(),
    package_data={'pullhandle': ['fixtures/*.json']},
    license='MIT',
    description='Typed, JSON-backed handles on GitHub pull requests',
    python_requires='>=3.7',
    install_requires=[
        'requests>=2.27',
    ],
    extras_require={'test': ['pytest', 'mock']},
    classifiers=[
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Version Control :: Git',
        'Topic :: Internet :: WWW/HTTP',
        'License :: OSI Approved :: MIT License',
    ],
)
