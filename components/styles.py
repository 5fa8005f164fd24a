"""
Styles Module - Utility class strings shared by component templates
Class names follow the site's Tailwind configuration (primary, neutral,
subtle, shadow-soft, ...).
"""

STYLES = {
    # Containers
    'page': 'container mx-auto px-4 py-12 min-h-[calc(100vh-160px)]',
    'article': 'max-w-4xl mx-auto bg-white dark:bg-gray-900 p-8 rounded-lg shadow-soft-lg border border-gray-200 dark:border-gray-700',
    'panel': 'card h-full flex flex-col items-center justify-center text-center min-h-[50vh]',
    'empty_card': 'card text-center py-12',

    # Typography
    'heading': 'text-heading mb-2',
    'panel_heading': 'text-xl md:text-2xl font-semibold text-neutral dark:text-gray-100 mb-3',
    'card_heading': 'text-lg font-semibold text-neutral dark:text-gray-100 mb-4',
    'lead': 'text-lg text-subtle dark:text-dark-subtle',
    'body': 'text-neutral dark:text-gray-300 leading-relaxed',
    'subtle': 'text-subtle max-w-md',

    # Lists
    'bullet_list': 'space-y-3 mb-8',
    'bullet_item': 'flex items-start text-neutral dark:text-gray-300',

    # Links
    'back_link': 'inline-flex items-center text-sm font-medium text-primary dark:text-indigo-400 hover:underline',
}


def style(name):
    """Class string for a named style, empty when the name is unknown"""
    return STYLES.get(name, '')
