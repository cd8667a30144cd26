from django import forms
from django.conf import settings


class BookingForm(forms.Form):
    # field names follow the JSON the booking page posts
    showId = forms.IntegerField(min_value=1)
    ticketCount = forms.IntegerField()
    userName = forms.CharField(max_length=120)
    rollNumber = forms.CharField(max_length=40)

    def _text(self, name):
        # CharField would stringify a JSON list or object
        if not isinstance(self.data.get(name), str):
            raise forms.ValidationError("Must be text.")
        return self.cleaned_data[name]

    def clean_userName(self):
        return self._text("userName")

    def clean_rollNumber(self):
        return self._text("rollNumber")

    def clean_ticketCount(self):
        n = self.cleaned_data["ticketCount"]
        cap = settings.MAX_TICKETS_PER_BOOKING
        if n < 1 or n > cap:
            raise forms.ValidationError(f"Book between 1 and {cap} tickets.")
        return n


class VerifyForm(forms.Form):
    code = forms.CharField(max_length=500)
    checkin = forms.BooleanField(required=False)
