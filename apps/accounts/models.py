from django.db import models


DEFAULT_PIN = '0000'


class User(models.Model):
    """Office member who runs a tab; identified by id, optionally gated by a PIN."""

    name = models.CharField(max_length=100)

    # Plaintext 4-digit PIN; every new user starts on the shared default
    pin = models.CharField(max_length=4, default=DEFAULT_PIN)
    must_reset_pin = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'users'
        ordering = ['id']
        constraints = [
            # Only customised PINs have to be unique
            models.UniqueConstraint(
                fields=['pin'],
                condition=~models.Q(pin=DEFAULT_PIN),
                name='unique_custom_pin',
            ),
        ]

    def __str__(self):
        return self.name

    @property
    def has_default_pin(self):
        return self.pin == DEFAULT_PIN
