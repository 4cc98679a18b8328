"""
Django settings for clubeassoc project.
"""

from pathlib import Path
import os
from dotenv import load_dotenv

# Carrega variáveis de ambiente
load_dotenv()

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent


# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-chave-padrao-dev')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv('DEBUG') == 'True'

ALLOWED_HOSTS = [h.strip() for h in os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h.strip()]


# ==============================================================================
# APPS
# ==============================================================================

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Libs visuais
    'crispy_forms',
    'crispy_bootstrap5',

    # API (token Bearer e CORS)
    'rest_framework',
    'rest_framework.authtoken',
    'corsheaders',

    # Apps do clube
    'core',
    'cadastros_clube.apps.CadastrosClubeConfig',
    'financeiro_clube',
    'agenda_clube',
    'relatorios_clube',
]


# ==============================================================================
# MIDDLEWARE
# ==============================================================================

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'core.sessao.SessaoMiddleware', # Depois da autenticação: monta request.sessao
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'clubeassoc.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'core.context_processors.sessao_clube',
            ],
        },
    },
]

WSGI_APPLICATION = 'clubeassoc.wsgi.application'


# ==============================================================================
# DATABASE
# ==============================================================================

# Em produção usa PostgreSQL (variáveis DB_*). Sem DB_NAME cai para SQLite local.
if os.getenv('DB_NAME'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.getenv('DB_NAME'),
            'USER': os.getenv('DB_USER'),
            'PASSWORD': os.getenv('DB_PASSWORD'),
            'HOST': os.getenv('DB_HOST'),
            'PORT': os.getenv('DB_PORT'),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }


# ==============================================================================
# CACHE (listas das coleções)
# ==============================================================================

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'clubeassoc-colecoes',
    }
}

# Tempo (segundos) que uma lista de coleção fica no cache antes de ser buscada de novo
CACHE_TIMEOUT_COLECOES = int(os.getenv('CACHE_TIMEOUT_COLECOES', '300'))


# ==============================================================================
# Password validation
# ==============================================================================
AUTH_PASSWORD_VALIDATORS = [
    { 'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator', 'OPTIONS': {'min_length': 6}, },
]

# Tamanho mínimo de senha exigido antes de qualquer chamada de autenticação
SENHA_TAMANHO_MINIMO = 6


# Internationalization
LANGUAGE_CODE = 'pt-br'
TIME_ZONE = 'America/Sao_Paulo'
USE_I18N = True
USE_TZ = True


# Static files (CSS, JavaScript, Images)
STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'static_root'


# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# --- MINHAS CONFIGURAÇÕES ---

# Usuário Personalizado (perfil do sistema)
AUTH_USER_MODEL = 'core.CustomUser'

# Redirecionamento de Login/Logout
LOGIN_REDIRECT_URL = 'dashboard'
LOGOUT_REDIRECT_URL = 'login'
LOGIN_URL = 'login'

# Login por email (normalizado) em vez de username
AUTHENTICATION_BACKENDS = [
    'core.backends.EmailBackend',
]

# Configuração do Crispy Forms (Bootstrap 5)
CRISPY_ALLOWED_TEMPLATE_PACKS = "bootstrap5"
CRISPY_TEMPLATE_PACK = "bootstrap5"

# Validade (segundos) do token Bearer usado nos endpoints de gestão de usuários
TOKEN_ACESSO_VALIDADE = int(os.getenv('TOKEN_ACESSO_VALIDADE', str(60 * 60 * 12)))

# CORS apenas nos endpoints JSON (/api/...)
CORS_URLS_REGEX = r'^/api/.*$'
CORS_ALLOW_ALL_ORIGINS = True
CORS_ALLOW_HEADERS = [
    'authorization',
    'x-client-info',
    'apikey',
    'content-type',
]

SESSION_COOKIE_NAME = 'clubeassoc_session'
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = 'Lax'
SESSION_COOKIE_SECURE = os.getenv('SESSION_COOKIE_SECURE') == 'True'


# ==============================================================================
# LOGGING
# ==============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simples': {
            'format': '[{asctime}] {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simples',
        },
    },
    'loggers': {
        'django.request': {'handlers': ['console'], 'level': 'WARNING', 'propagate': False},
        'core': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'cadastros_clube': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'financeiro_clube': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'agenda_clube': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'relatorios_clube': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
    },
}
